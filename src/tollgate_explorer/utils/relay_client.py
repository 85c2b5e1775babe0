"""Relay subscription interface and its nostr-sdk implementation.

The release store never speaks the relay wire protocol itself. It consumes
the narrow streaming-subscription contract defined here:

* [RelayClient.subscribe()][tollgate_explorer.utils.relay_client.RelayClient.subscribe]
  opens a subscription for a
  [SubscriptionRequest][tollgate_explorer.utils.relay_client.SubscriptionRequest]
  and returns a
  [SubscriptionHandle][tollgate_explorer.utils.relay_client.SubscriptionHandle].
* The client then calls the
  [SubscriptionListener][tollgate_explorer.utils.relay_client.SubscriptionListener]
  with ``on_event`` (zero or more times, any order), ``on_eose`` (at most
  once) or ``on_error`` (at most once, terminal for that handle).
* ``SubscriptionHandle.unsubscribe()`` abandons the subscription.

[NostrRelayClient][tollgate_explorer.utils.relay_client.NostrRelayClient]
implements the contract on top of ``nostr_sdk.Client.stream_events``.
Reconnect and backoff policy are left to nostr-sdk.

Note:
    Signatures are not re-verified here; nostr-sdk only hands over events
    whose signatures it already checked.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Final

from nostr_sdk import (
    Client,
    ClientBuilder,
    Filter,
    Kind,
    NostrSdkError,
    NostrSigner,
    PublicKey,
    RelayUrl,
)

from tollgate_explorer.core.exceptions import SubscriptionError
from tollgate_explorer.models.constants import DEFAULT_LIMIT, EventKind
from tollgate_explorer.models.release import Release


if TYPE_CHECKING:
    from nostr_sdk import Keys


DEFAULT_TIMEOUT: Final[float] = 10.0


logger = logging.getLogger(__name__)

# Silence nostr-sdk UniFFI callback stack traces (handled by our code)
logging.getLogger("nostr_sdk").setLevel(logging.CRITICAL)


@dataclass(frozen=True, slots=True)
class SubscriptionRequest:
    """Event filter for a release subscription.

    Attributes:
        authors: Hex public keys of the publishers.
        kind: Event kind, NIP-94 file metadata by default.
        limit: Maximum number of stored events to request.
    """

    authors: tuple[str, ...]
    kind: int = EventKind.FILE_METADATA
    limit: int = DEFAULT_LIMIT

    def to_filter(self) -> Filter:
        """Build the equivalent ``nostr_sdk.Filter``.

        Raises:
            NostrSdkError: If an author is not a valid public key.
        """
        return (
            Filter()
            .kind(Kind(int(self.kind)))
            .authors([PublicKey.parse(author) for author in self.authors])
            .limit(self.limit)
        )


class SubscriptionListener(ABC):
    """Receives the notifications of one subscription."""

    @abstractmethod
    def on_event(self, release: Release) -> None:
        """Handle one delivered release event."""

    @abstractmethod
    def on_eose(self) -> None:
        """Handle the end-of-stored-events signal."""

    @abstractmethod
    def on_error(self, message: str) -> None:
        """Handle a terminal transport failure."""


class SubscriptionHandle(ABC):
    """Cancellation handle returned by ``RelayClient.subscribe()``."""

    @abstractmethod
    def unsubscribe(self) -> None:
        """Stop delivery. Safe to call more than once."""


class RelayClient(ABC):
    """Opens release subscriptions against one or more relays."""

    @abstractmethod
    def subscribe(
        self, request: SubscriptionRequest, listener: SubscriptionListener
    ) -> SubscriptionHandle:
        """Open a subscription and return its handle.

        Raises:
            SubscriptionError: If the subscription cannot be opened at all.
        """


def create_client(keys: Keys | None = None) -> Client:
    """Create a nostr-sdk client, optionally with a signer for NIP-42 auth.

    Returns:
        Configured ``Client`` instance (call ``add_relay()`` before use).
    """
    builder = ClientBuilder()
    if keys is not None:
        builder = builder.signer(NostrSigner.keys(keys))
    return builder.build()


@dataclass(slots=True)
class NostrSubscription(SubscriptionHandle):
    """Handle wrapping the asyncio task that drives one nostr-sdk stream."""

    task: asyncio.Task[None]
    closed: bool = field(default=False, init=False)

    def unsubscribe(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.task.cancel()


class NostrRelayClient(RelayClient):
    """[RelayClient][tollgate_explorer.utils.relay_client.RelayClient] backed by nostr-sdk.

    Each subscription runs in its own asyncio task with its own
    ``nostr_sdk.Client``: it connects to the configured relays, streams
    matching events until every relay sent EOSE or ``timeout`` expires,
    then signals ``on_eose``. Transport failures are reported through
    ``on_error``. Cancelling the task (``unsubscribe()``) shuts the client
    down.

    Examples:
        ```python
        client = NostrRelayClient(["wss://relay.damus.io"], timeout=15.0)
        store = ReleaseStore(client)
        store.set_publisher_key(DEFAULT_PUBLISHER_KEY)   # needs a running loop
        ```
    """

    def __init__(
        self,
        relays: Sequence[str],
        *,
        timeout: float = DEFAULT_TIMEOUT,
        keys: Keys | None = None,
    ) -> None:
        if not relays:
            raise ValueError("At least one relay URL is required")
        self._relays = tuple(relays)
        self._timeout = timeout
        self._keys = keys

    @property
    def relays(self) -> tuple[str, ...]:
        return self._relays

    def subscribe(
        self, request: SubscriptionRequest, listener: SubscriptionListener
    ) -> NostrSubscription:
        """Schedule the stream on the running event loop.

        Raises:
            SubscriptionError: If called outside a running event loop.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise SubscriptionError("No running event loop to stream relay events on") from e
        task = loop.create_task(self._stream(request, listener))
        return NostrSubscription(task)

    async def _stream(self, request: SubscriptionRequest, listener: SubscriptionListener) -> None:
        client = create_client(self._keys)
        try:
            for url in self._relays:
                await client.add_relay(RelayUrl.parse(url))
            await client.connect()

            stream = await client.stream_events(
                request.to_filter(), timeout=timedelta(seconds=self._timeout)
            )
            while (event := await stream.next()) is not None:
                try:
                    release = Release.from_nostr_event(event)
                except (TypeError, ValueError) as e:
                    logger.debug("event_parse_error error=%s", e)
                    continue
                listener.on_event(release)
        except (OSError, TimeoutError, NostrSdkError) as e:
            logger.warning("stream_failed relays=%d error=%s", len(self._relays), e)
            listener.on_error(str(e) or type(e).__name__)
            return
        finally:
            # nostr-sdk Rust FFI can raise arbitrary exception types during shutdown.
            with contextlib.suppress(Exception):
                await client.shutdown()

        listener.on_eose()

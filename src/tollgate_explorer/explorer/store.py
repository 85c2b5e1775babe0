"""
Streaming release aggregator for one publisher at a time.

[ReleaseStore][tollgate_explorer.explorer.store.ReleaseStore] owns the live
collection of releases for the selected publisher key. It opens a
subscription through an injected
[RelayClient][tollgate_explorer.utils.relay_client.RelayClient], merges
arriving events with first-wins deduplication by id, and keeps the
collection ordered newest first after every insertion.

State machine per subscription (one *generation*):

```text
IDLE ──open──> CONNECTING ──event──> STREAMING
                   │                     │
                   ├──────eose───────────┼──> SETTLED
                   └──────error──────────┴──> FAILED

SETTLED / FAILED ──refetch() or set_publisher_key()──> CONNECTING
```

Note:
    Every subscription is tagged with a generation number. Opening a new
    subscription unsubscribes the previous handle and bumps the
    generation, so callbacks still in flight from an old subscription are
    discarded instead of leaking into the new collection.

    The store assumes callbacks are delivered sequentially on one event
    loop (as [NostrRelayClient][tollgate_explorer.utils.relay_client.NostrRelayClient]
    does) and takes no locks.

See Also:
    [filter_and_sort][tollgate_explorer.explorer.filters.filter_and_sort]:
        Derives the visible subset of ``releases``.
    [unique_values][tollgate_explorer.explorer.facets.unique_values]:
        Derives filter choices from ``releases``.
    [fallback_releases][tollgate_explorer.explorer.fallback.fallback_releases]:
        Sample data shown when the default publisher has no live events.
"""

from __future__ import annotations

import bisect
import time
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Self

from tollgate_explorer.core.exceptions import ConnectivityError, ReleaseNotFoundError
from tollgate_explorer.core.logger import Logger, setup_logging
from tollgate_explorer.models.constants import DEFAULT_LIMIT, DEFAULT_PUBLISHER_KEY, Facet
from tollgate_explorer.models.release import Release
from tollgate_explorer.utils.keys import is_valid_publisher_key
from tollgate_explorer.utils.relay_client import (
    NostrRelayClient,
    RelayClient,
    SubscriptionHandle,
    SubscriptionListener,
    SubscriptionRequest,
)

from .facets import unique_values
from .fallback import fallback_releases
from .filters import filter_and_sort


if TYPE_CHECKING:
    from types import TracebackType

    from tollgate_explorer.models.filter_spec import FilterSpec

    from .configs import ExplorerConfig


class StoreState(StrEnum):
    """Lifecycle state of the current subscription."""

    IDLE = "idle"
    CONNECTING = "connecting"
    STREAMING = "streaming"
    SETTLED = "settled"
    FAILED = "failed"


_LOADING_STATES = frozenset({StoreState.CONNECTING, StoreState.STREAMING})


def _newest_first(release: Release) -> int:
    return -release.timestamp


def _short_key(key: object) -> str:
    return str(key)[:16]


class _GenerationListener(SubscriptionListener):
    """Forwards subscription callbacks to the store, stamped with their generation."""

    __slots__ = ("_generation", "_store")

    def __init__(self, store: ReleaseStore, generation: int) -> None:
        self._store = store
        self._generation = generation

    def on_event(self, release: Release) -> None:
        self._store._handle_event(self._generation, release)

    def on_eose(self) -> None:
        self._store._handle_eose(self._generation)

    def on_error(self, message: str) -> None:
        self._store._handle_error(self._generation, message)


class ReleaseStore:
    """Live, deduplicated, newest-first release collection for one publisher.

    Read model: ``releases``, ``loading``, ``error``, ``state``,
    ``publisher_key``. Commands: ``set_publisher_key()``, ``refetch()``,
    ``close()``.

    The constructor performs no I/O. The first subscription opens on
    ``refetch()`` or ``set_publisher_key()``.

    Args:
        client: Relay client used to open subscriptions.
        publisher_key: Initial publisher, the TollGate key by default.
        limit: Maximum number of stored events requested.
        clock: Returns the current Unix time; used to date the sample
            fallback releases.
        json_logs: Emit JSON log records instead of key=value pairs.

    Examples:
        ```python
        store = ReleaseStore(NostrRelayClient(DEFAULT_RELAYS))
        store.refetch()
        ...
        visible = store.filtered(FilterSpec.default())
        ```
    """

    def __init__(
        self,
        client: RelayClient,
        *,
        publisher_key: str = DEFAULT_PUBLISHER_KEY,
        limit: int = DEFAULT_LIMIT,
        clock: Callable[[], float] = time.time,
        json_logs: bool = False,
    ) -> None:
        self._client = client
        self._publisher_key = publisher_key
        self._limit = limit
        self._clock = clock
        self._logger = Logger("release_store", json_output=json_logs)

        self._state = StoreState.IDLE
        self._error: str | None = None
        self._releases: list[Release] = []
        self._by_id: dict[str, Release] = {}
        self._received = 0
        self._generation = 0
        self._handle: SubscriptionHandle | None = None

    @classmethod
    def from_config(cls, config: ExplorerConfig, client: RelayClient | None = None) -> Self:
        """Build a store from an [ExplorerConfig][tollgate_explorer.explorer.configs.ExplorerConfig].

        Without an explicit *client*, a
        [NostrRelayClient][tollgate_explorer.utils.relay_client.NostrRelayClient]
        is created for the configured relays. The configured log level is
        applied to the root logger.
        """
        setup_logging(config.logging.level)
        if client is None:
            client = NostrRelayClient(config.relays, timeout=config.timeout)
        return cls(
            client,
            publisher_key=config.publisher_key,
            limit=config.limit,
            json_logs=config.logging.json_output,
        )

    # -------------------------------------------------------------------------
    # Read model
    # -------------------------------------------------------------------------

    @property
    def releases(self) -> tuple[Release, ...]:
        """Snapshot of the collection, newest first."""
        return tuple(self._releases)

    @property
    def loading(self) -> bool:
        """True while a subscription is open and has not settled or failed."""
        return self._state in _LOADING_STATES

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def publisher_key(self) -> str:
        return self._publisher_key

    @property
    def generation(self) -> int:
        """Number of subscriptions opened so far; identifies the current one."""
        return self._generation

    def get_release(self, release_id: str) -> Release:
        """Return the release with *release_id* from the current collection.

        Raises:
            ReleaseNotFoundError: If no such release has been received.
        """
        try:
            return self._by_id[release_id]
        except KeyError:
            raise ReleaseNotFoundError(release_id) from None

    def filtered(self, spec: FilterSpec) -> list[Release]:
        """Visible releases under *spec*, newest first."""
        return filter_and_sort(self._releases, spec)

    def available(self, facet: Facet | str) -> list[str]:
        """Filter choices for *facet* from the unfiltered collection."""
        return unique_values(self._releases, facet)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def set_publisher_key(self, key: str) -> None:
        """Switch to another publisher, replacing the collection.

        Setting the key that is already active is a no-op once the store
        has been started; use ``refetch()`` to reload it.
        """
        if key == self._publisher_key and self._state is not StoreState.IDLE:
            self._logger.debug("publisher_unchanged", publisher=_short_key(key))
            return
        self._logger.info(
            "publisher_changed", old=_short_key(self._publisher_key), new=_short_key(key)
        )
        self._publisher_key = key
        self._open()

    def refetch(self) -> None:
        """Discard the collection and resubscribe for the current publisher."""
        self._open()

    def close(self) -> None:
        """Abandon the current subscription and return to ``IDLE``.

        The collection is kept; late callbacks are discarded.
        """
        self._unsubscribe()
        self._generation += 1
        self._state = StoreState.IDLE

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Subscription lifecycle
    # -------------------------------------------------------------------------

    def _unsubscribe(self) -> None:
        if self._handle is not None:
            self._handle.unsubscribe()
            self._handle = None

    def _reset(self) -> None:
        self._releases = []
        self._by_id = {}
        self._received = 0
        self._error = None

    def _use_fallback(self) -> None:
        self._releases = fallback_releases(now=int(self._clock()))
        self._by_id = {release.id: release for release in self._releases}
        self._logger.info("fallback_releases_used", count=len(self._releases))

    def _open(self) -> None:
        self._unsubscribe()
        self._generation += 1
        generation = self._generation
        self._reset()

        if not is_valid_publisher_key(self._publisher_key):
            # Malformed keys cannot match any author: settle with no results.
            self._logger.warning(
                "invalid_publisher_key", publisher=_short_key(self._publisher_key)
            )
            self._state = StoreState.SETTLED
            return

        self._state = StoreState.CONNECTING
        request = SubscriptionRequest(authors=(self._publisher_key,), limit=self._limit)
        self._logger.info(
            "subscription_opened",
            generation=generation,
            publisher=self._publisher_key[:16],
            limit=self._limit,
        )

        try:
            handle = self._client.subscribe(request, _GenerationListener(self, generation))
        except (ConnectivityError, OSError) as e:
            self._logger.error("subscription_failed", generation=generation, error=str(e))
            self._fail_open(str(e))
            return
        except Exception as e:  # Broad: error boundary for injected clients
            self._logger.exception("subscription_failed", generation=generation, error=repr(e))
            self._fail_open(str(e) or type(e).__name__)
            return

        if generation == self._generation:
            self._handle = handle
        else:
            # A callback already switched publisher during subscribe().
            handle.unsubscribe()

    def _fail_open(self, message: str) -> None:
        self._error = f"Failed to fetch releases: {message}"
        self._state = StoreState.FAILED
        if self._publisher_key == DEFAULT_PUBLISHER_KEY:
            self._use_fallback()

    def _is_stale(self, generation: int, callback: str) -> bool:
        if generation == self._generation:
            return False
        self._logger.debug(
            "stale_callback_dropped",
            callback=callback,
            generation=generation,
            current=self._generation,
        )
        return True

    def _handle_event(self, generation: int, release: Release) -> None:
        if self._is_stale(generation, "event") or self._state is StoreState.FAILED:
            return

        self._received += 1
        if release.id in self._by_id:
            self._logger.debug("duplicate_release_dropped", id=release.id[:16])
            return

        bisect.insort(self._releases, release, key=_newest_first)
        self._by_id[release.id] = release
        if self._state is StoreState.CONNECTING:
            self._state = StoreState.STREAMING
        self._logger.debug(
            "release_received",
            id=release.id[:16],
            created_at=release.created_at,
            total=len(self._releases),
        )

    def _handle_eose(self, generation: int) -> None:
        if self._is_stale(generation, "eose") or not self.loading:
            return

        self._logger.info(
            "end_of_stored_events", generation=generation, received=self._received
        )
        if self._received == 0 and self._publisher_key == DEFAULT_PUBLISHER_KEY:
            self._use_fallback()
        self._state = StoreState.SETTLED

    def _handle_error(self, generation: int, message: str) -> None:
        if self._is_stale(generation, "error") or self._state is StoreState.FAILED:
            return

        self._logger.error("subscription_failed", generation=generation, error=message)
        self._error = f"Failed to fetch releases: {message}"
        self._state = StoreState.FAILED

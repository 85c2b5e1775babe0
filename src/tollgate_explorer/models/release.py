"""
Immutable release record built from a NIP-94 file metadata event.

A [Release][tollgate_explorer.models.release.Release] is created when a
subscription delivers an event and is never mutated afterwards. Derived
attributes (version, channel, product type, ...) are not stored here;
they are computed on demand by [tollgate_explorer.nips.nip94][].

See Also:
    [tollgate_explorer.nips.nip94.accessors][]: Typed accessors with
        fallback chains over the tags of a release.
    [ReleaseStore][tollgate_explorer.explorer.store.ReleaseStore]: Owns the
        live, deduplicated collection of releases.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._validation import validate_instance, validate_timestamp
from .tag import Tag


if TYPE_CHECKING:
    from nostr_sdk import Event as NostrEvent


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Release:
    """Immutable release event.

    Raw tag arrays passed as ``tags`` are normalized into
    [Tag][tollgate_explorer.models.tag.Tag] records during construction.
    Malformed tag arrays are dropped rather than raised, so a publisher
    emitting odd tags never makes the release unusable.

    Attributes:
        id: Event identifier, primary key for deduplication. May be empty.
        pubkey: Hex public key of the signer.
        created_at: Unix timestamp in seconds, or ``None`` if absent.
            Absent timestamps order as ``0`` (oldest).
        tags: Ordered tags. A name may repeat; lookups take the first.
        content: Free-text description.

    Raises:
        TypeError: If ``id``, ``pubkey`` or ``content`` is not a string,
            ``created_at`` is not an int, or ``tags`` is not a sequence.
        ValueError: If ``created_at`` is negative.

    Examples:
        ```python
        release = Release(
            id="ab" * 32,
            pubkey="cd" * 32,
            created_at=1_700_000_000,
            tags=[["version", "v1.2.0"], ["release_channel", "beta"]],
        )
        release.tag_value("version")   # 'v1.2.0'
        release.tag_value("missing")   # None
        ```
    """

    id: str
    pubkey: str = ""
    created_at: int | None = None
    tags: tuple[Tag, ...] = ()
    content: str = ""

    def __post_init__(self) -> None:
        """Validate field types and normalize raw tag arrays."""
        validate_instance(self.id, str, "id")
        validate_instance(self.pubkey, str, "pubkey")
        validate_instance(self.content, str, "content")
        if self.created_at is not None:
            validate_timestamp(self.created_at, "created_at")

        if isinstance(self.tags, str) or not isinstance(self.tags, Sequence):
            raise TypeError(f"tags must be a sequence, got {type(self.tags).__name__}")

        parsed: list[Tag] = []
        for raw in self.tags:
            tag = Tag.parse(raw)
            if tag is None:
                logger.debug("malformed_tag_dropped release=%s tag=%r", self.id[:16], raw)
                continue
            parsed.append(tag)
        object.__setattr__(self, "tags", tuple(parsed))

    @property
    def timestamp(self) -> int:
        """Ordering key: ``created_at`` with absent values treated as ``0``."""
        return self.created_at or 0

    def tag_value(self, name: str) -> str | None:
        """Return the value of the first tag named *name*, or ``None``."""
        for tag in self.tags:
            if tag.name == name:
                return tag.value
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return the release in the NIP-01 JSON event shape (without kind/sig)."""
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "tags": [tag.to_list() for tag in self.tags],
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Release:
        """Build a release from a NIP-01 JSON event mapping.

        Missing keys fall back to their defaults; ``null`` content or tags
        are treated as empty.
        """
        return cls(
            id=data.get("id") or "",
            pubkey=data.get("pubkey") or "",
            created_at=data.get("created_at"),
            tags=data.get("tags") or (),
            content=data.get("content") or "",
        )

    @classmethod
    def from_nostr_event(cls, event: NostrEvent) -> Release:
        """Build a release from a ``nostr_sdk.Event``.

        Signatures are not re-verified; the relay client is trusted to
        deliver validly signed events.
        """
        return cls(
            id=event.id().to_hex(),
            pubkey=event.author().to_hex(),
            created_at=event.created_at().as_secs(),
            tags=tuple(list(tag.as_vec()) for tag in event.tags().to_vec()),
            content=event.content(),
        )

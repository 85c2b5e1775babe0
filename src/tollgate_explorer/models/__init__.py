"""Pure frozen dataclasses with zero I/O for release events and filters.

The models layer is the foundation of the diamond DAG. It has **no
dependencies** on any other package in the project. Every model uses
``@dataclass(frozen=True, slots=True)`` for immutability, and all
validation happens in ``__post_init__`` so invalid instances never escape
the constructor.

Attributes:
    Tag: Fixed-shape ``(name, value, extra)`` record for one event tag.
    Release: Immutable NIP-94 release event with first-match tag lookup.
    FilterSpec: Compound per-facet filter with default/toggle/clear helpers.
    ProductType: Software family enumeration with display names.
    ReleaseChannel: Release maturity enumeration.
    Facet: Filterable dimensions.
    EventKind: Nostr event kinds used by the explorer.

Note:
    ``object.__setattr__`` is used in ``__post_init__`` to store normalized
    values on frozen dataclasses. ``__post_init__`` runs during ``__init__``
    before the instance is exposed to external code.
"""

from .constants import (
    DEFAULT_LIMIT,
    DEFAULT_MIME_TYPE,
    DEFAULT_PUBLISHER_KEY,
    DEFAULT_RELAYS,
    UNKNOWN,
    EventKind,
    Facet,
    ProductType,
    ReleaseChannel,
)
from .filter_spec import FilterSpec
from .release import Release
from .tag import Tag


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_MIME_TYPE",
    "DEFAULT_PUBLISHER_KEY",
    "DEFAULT_RELAYS",
    "UNKNOWN",
    "EventKind",
    "Facet",
    "FilterSpec",
    "ProductType",
    "Release",
    "ReleaseChannel",
    "Tag",
]

"""Shared constants for the models layer.

Defines enumerations and other constants that are used across multiple
model modules. Placing them here avoids circular dependencies between
the models, nips and explorer layers.

See Also:
    [tollgate_explorer.models.release][]: Uses ``UNKNOWN`` and the
        NIP-94 event kind.
    [tollgate_explorer.models.filter_spec][]: Uses
        [ProductType][tollgate_explorer.models.constants.ProductType] and
        [ReleaseChannel][tollgate_explorer.models.constants.ReleaseChannel]
        for the default filter.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Final


class EventKind(IntEnum):
    """Well-known Nostr event kinds consumed by the explorer.

    Attributes:
        FILE_METADATA: Kind 1063 -- NIP-94 file metadata. Every release
            is published as one of these events.
    """

    FILE_METADATA = 1_063


class ProductType(StrEnum):
    """Software family a release belongs to.

    The string values match the ``name`` tag prefixes used by publishers,
    so a member compares equal to the raw tag fragment.

    Attributes:
        TOLLGATE_OS: OpenWRT-based firmware image.
        TOLLGATE_CORE: Payment gateway package for OpenWRT.
        TOLLGATE_BASIC: Basic Go module package.

    See Also:
        [classify_product][tollgate_explorer.nips.nip94.classifier.classify_product]:
            Infers the member for a release.
    """

    TOLLGATE_OS = "tollgate-os"
    TOLLGATE_CORE = "tollgate-core"
    TOLLGATE_BASIC = "tollgate-module-basic-go"

    @property
    def display_name(self) -> str:
        """Human-readable product name."""
        return _PRODUCT_DISPLAY_NAMES[self]


_PRODUCT_DISPLAY_NAMES: Final[dict[ProductType, str]] = {
    ProductType.TOLLGATE_OS: "TollGate OS",
    ProductType.TOLLGATE_CORE: "TollGate Core",
    ProductType.TOLLGATE_BASIC: "TollGate Basic Module",
}


class ReleaseChannel(StrEnum):
    """Release maturity classification carried by the ``release_channel`` tag."""

    STABLE = "stable"
    BETA = "beta"
    ALPHA = "alpha"
    DEV = "dev"


class Facet(StrEnum):
    """Filterable dimension whose available choices derive from the data set.

    The values double as the field names of
    [FilterSpec][tollgate_explorer.models.filter_spec.FilterSpec].
    """

    CHANNELS = "channels"
    ARCHITECTURES = "architectures"
    DEVICES = "devices"
    PRODUCTS = "products"


DEFAULT_PUBLISHER_KEY: Final[str] = (
    "5075e61f0b048148b60105c1dd72bbeae1957336ae5824087e52efa374f8416a"
)

DEFAULT_RELAYS: Final[tuple[str, ...]] = (
    "wss://relay.damus.io",
    "wss://relay.nostr.band",
    "wss://nos.lol",
    "wss://relay.snort.social",
)

DEFAULT_LIMIT: Final[int] = 500

UNKNOWN: Final[str] = "Unknown"

DEFAULT_MIME_TYPE: Final[str] = "application/octet-stream"

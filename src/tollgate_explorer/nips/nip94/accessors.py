"""
Typed accessors for NIP-94 release metadata tags.

Each ``get_release_*`` function is total: it never raises, and returns a
documented default when the tag is absent or empty. Lookups follow a fixed
fallback chain, always taking the FIRST tag with a given name.

============================  ==================================================
Accessor                      Fallback chain
============================  ==================================================
``get_release_version``       ``version`` > ``tollgate_os_version`` > ``id[:8]``
                              > ``"Unknown"``
``get_release_channel``       ``release_channel`` > ``"stable"``
``get_release_architecture``  ``architecture`` > ``"Unknown"``
``get_release_openwrt_version``  ``openwrt_version`` > ``"Unknown"``
``get_release_device_id``     ``device_id`` > ``"Unknown"``
``get_release_supported_devices``  ``supported_devices`` > ``"Unknown"``
``get_release_download_url``  ``url`` > ``None``
``get_release_file_hash``     ``x`` > ``ox`` > ``None``
``get_release_mime_type``     ``m`` > ``"application/octet-stream"``
============================  ==================================================

Note:
    An empty tag value counts as absent, so ``["version", ""]`` falls
    through to the next rule in the chain.

See Also:
    [classify_product][tollgate_explorer.nips.nip94.classifier.classify_product]:
        Product type inference, exposed here as
        [get_release_product_type][tollgate_explorer.nips.nip94.accessors.get_release_product_type].
"""

from __future__ import annotations

import datetime

from tollgate_explorer.models.constants import (
    DEFAULT_MIME_TYPE,
    UNKNOWN,
    ProductType,
    ReleaseChannel,
)
from tollgate_explorer.models.release import Release  # noqa: TC001

from .classifier import classify_product, tag_text


_VERSION_ID_PREFIX = 8
_ELLIPSIS = "..."


def get_release_version(release: Release) -> str:
    """Display version: new ``version`` tag, then the deprecated OS tag, then the id prefix."""
    return (
        tag_text(release, "version")
        or tag_text(release, "tollgate_os_version")
        or release.id[:_VERSION_ID_PREFIX]
        or UNKNOWN
    )


def get_release_date(release: Release) -> str:
    """Format ``created_at`` as ``"Mon D, YYYY"`` (UTC), or ``"Unknown"``."""
    if not release.created_at:
        return UNKNOWN
    try:
        date = datetime.datetime.fromtimestamp(release.created_at, tz=datetime.UTC)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN
    return f"{date:%b} {date.day}, {date.year}"


def get_release_channel(release: Release) -> str:
    return tag_text(release, "release_channel") or ReleaseChannel.STABLE.value


def get_release_architecture(release: Release) -> str:
    return tag_text(release, "architecture") or UNKNOWN


def get_release_openwrt_version(release: Release) -> str:
    return tag_text(release, "openwrt_version") or UNKNOWN


def get_release_device_id(release: Release) -> str:
    return tag_text(release, "device_id") or UNKNOWN


def get_release_supported_devices(release: Release) -> str:
    return tag_text(release, "supported_devices") or UNKNOWN


def get_release_download_url(release: Release) -> str | None:
    return tag_text(release, "url")


def get_release_file_hash(release: Release) -> str | None:
    """SHA-256 of the served file (``x``), else of the original file (``ox``)."""
    return tag_text(release, "x") or tag_text(release, "ox")


def get_release_mime_type(release: Release) -> str:
    return tag_text(release, "m") or DEFAULT_MIME_TYPE


def get_release_product_type(release: Release) -> ProductType:
    return classify_product(release)


def get_product_display_name(product: ProductType | str) -> str:
    """Human-readable name for *product*, or ``"TollGate"`` if unrecognised."""
    try:
        return ProductType(product).display_name
    except ValueError:
        return "TollGate"


def truncate_text(text: str | None, max_length: int) -> str:
    """Shorten *text* to at most *max_length* characters, ending in ``"..."``.

    Empty or ``None`` input yields ``""``. Text that already fits is
    returned unchanged. For ``max_length < 3`` the ellipsis itself is
    clipped, so the result never exceeds ``max(max_length, 0)`` characters.
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    if max_length < len(_ELLIPSIS):
        return _ELLIPSIS[: max(max_length, 0)]
    return text[: max_length - len(_ELLIPSIS)] + _ELLIPSIS

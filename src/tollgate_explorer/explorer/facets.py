"""Facet extraction: the distinct values available for each filter dimension.

Always computed over the full, unfiltered collection so the filter choices
do not shrink as filters are applied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Final

from tollgate_explorer.models.constants import UNKNOWN, Facet
from tollgate_explorer.models.release import Release
from tollgate_explorer.nips.nip94 import (
    get_release_architecture,
    get_release_channel,
    get_release_device_id,
    get_release_product_type,
)


_FACET_ACCESSORS: Final[dict[Facet, Callable[[Release], str]]] = {
    Facet.CHANNELS: get_release_channel,
    Facet.ARCHITECTURES: get_release_architecture,
    Facet.DEVICES: get_release_device_id,
    Facet.PRODUCTS: get_release_product_type,
}


def unique_values(releases: Iterable[Release] | None, facet: Facet | str) -> list[str]:
    """Sorted distinct derived values of *facet*, excluding ``"Unknown"``.

    An unrecognised facet name yields an empty list.

    Examples:
        ```python
        unique_values(store.releases, Facet.ARCHITECTURES)
        # ['aarch64_cortex-a53', 'mipsel_24kc']
        ```
    """
    if not releases:
        return []
    try:
        accessor = _FACET_ACCESSORS[Facet(facet)]
    except ValueError:
        return []

    values = {str(accessor(release)) for release in releases}
    values.discard(UNKNOWN)
    values.discard("")
    return sorted(values)

"""
Filter and sort engine for release collections.

Pure functions of ``(releases, FilterSpec) -> list[Release]``. Each
non-empty facet in the spec is a constraint; a release is kept only if
it satisfies all of them:

* channels, products, architectures: exact set membership of the derived
  value.
* devices: at least one requested device string is a substring of the
  release's device id OR of its supported devices list.

Sorting is always last: a stable sort by ``created_at`` descending, so
releases with equal timestamps keep their input order.

See Also:
    [FilterSpec][tollgate_explorer.models.filter_spec.FilterSpec]: The
        filter value object.
    [unique_values][tollgate_explorer.explorer.facets.unique_values]:
        Derives the choices available for each facet.
"""

from __future__ import annotations

from collections.abc import Iterable

from tollgate_explorer.models.filter_spec import FilterSpec  # noqa: TC001
from tollgate_explorer.models.release import Release  # noqa: TC001
from tollgate_explorer.nips.nip94 import (
    get_release_architecture,
    get_release_channel,
    get_release_device_id,
    get_release_product_type,
    get_release_supported_devices,
)


def matches(release: Release, spec: FilterSpec) -> bool:
    """Return True if *release* satisfies every constrained facet of *spec*."""
    if spec.channels and get_release_channel(release) not in spec.channels:
        return False

    if spec.products and get_release_product_type(release) not in spec.products:
        return False

    if spec.architectures and get_release_architecture(release) not in spec.architectures:
        return False

    if spec.devices:
        device_id = get_release_device_id(release)
        supported = get_release_supported_devices(release)
        if not any(device in device_id or device in supported for device in spec.devices):
            return False

    return True


def apply_filters(releases: Iterable[Release] | None, spec: FilterSpec) -> list[Release]:
    """Keep the releases that match *spec*, preserving input order."""
    if not releases:
        return []
    return [release for release in releases if matches(release, spec)]


def sort_by_date(releases: Iterable[Release] | None) -> list[Release]:
    """Return a new list ordered newest first; missing timestamps sort as 0."""
    if not releases:
        return []
    return sorted(releases, key=lambda release: release.timestamp, reverse=True)


def filter_and_sort(releases: Iterable[Release] | None, spec: FilterSpec) -> list[Release]:
    """Visible subset of *releases* under *spec*, newest first."""
    return sort_by_date(apply_filters(releases, spec))

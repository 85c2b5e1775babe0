"""
Compound release filter.

A [FilterSpec][tollgate_explorer.models.filter_spec.FilterSpec] holds one
set of accepted values per [Facet][tollgate_explorer.models.constants.Facet].
An empty set means "no constraint" for that facet. The spec is a value
object: every edit returns a new instance.

See Also:
    [apply_filters][tollgate_explorer.explorer.filters.apply_filters]:
        Evaluates a spec against a release collection.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from ._validation import validate_str_set
from .constants import Facet, ProductType, ReleaseChannel


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Immutable multi-field release filter.

    Any iterable of strings is accepted for each field and stored as a
    ``frozenset``. Product values are coerced to
    [ProductType][tollgate_explorer.models.constants.ProductType].

    Attributes:
        channels: Accepted release channels (exact match).
        products: Accepted product types (exact match).
        architectures: Accepted architectures (exact match).
        devices: Device queries, each matched as a substring of the
            device id or the supported devices list.

    Raises:
        TypeError: If a field is not a collection of strings.
        ValueError: If a product value is not a known product type.

    Examples:
        ```python
        spec = FilterSpec.default()
        spec = spec.toggled(Facet.DEVICES, "gl-mt3000")
        spec.has_active_filters   # True
        spec.cleared() == FilterSpec.default()   # True
        ```
    """

    channels: frozenset[str] = frozenset()
    products: frozenset[ProductType] = frozenset()
    architectures: frozenset[str] = frozenset()
    devices: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "channels", validate_str_set(self.channels, "channels"))
        products = validate_str_set(self.products, "products")
        object.__setattr__(self, "products", frozenset(ProductType(p) for p in products))
        object.__setattr__(
            self, "architectures", validate_str_set(self.architectures, "architectures")
        )
        object.__setattr__(self, "devices", validate_str_set(self.devices, "devices"))

    @classmethod
    def default(cls) -> FilterSpec:
        """Stable channel only, every product, no architecture/device constraint."""
        return cls(
            channels=frozenset({ReleaseChannel.STABLE.value}),
            products=frozenset(ProductType),
        )

    def values(self, facet: Facet | str) -> frozenset[str]:
        """Return the accepted values for *facet*."""
        return getattr(self, Facet(facet).value)  # type: ignore[no-any-return]

    def toggled(self, facet: Facet | str, value: str) -> FilterSpec:
        """Return a copy with *value* added to or removed from *facet*."""
        field_name = Facet(facet).value
        current: frozenset[str] = getattr(self, field_name)
        updated = current - {value} if value in current else current | {value}
        return replace(self, **{field_name: updated})

    def with_values(self, facet: Facet | str, values: Iterable[str]) -> FilterSpec:
        """Return a copy with *facet* replaced by *values*."""
        return replace(self, **{Facet(facet).value: frozenset(values)})

    def cleared(self) -> FilterSpec:
        """Return the default spec."""
        return type(self).default()

    @property
    def has_active_filters(self) -> bool:
        """Whether the spec narrows results beyond the default stable-only view."""
        return bool(
            self.architectures
            or self.devices
            or self.channels != frozenset({ReleaseChannel.STABLE.value})
        )

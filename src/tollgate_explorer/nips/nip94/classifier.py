"""
Product type inference for NIP-94 release events.

Publishers have used two tagging schemes over time. The standardized one
carries a ``name`` tag; legacy publishers only carry a ``package_name``
or ``tollgate_os_version`` tag, or nothing beyond free text. Rules are
evaluated in a fixed order and the first match wins:

1. ``name`` tag contains ``tollgate-os`` / ``tollgate-core`` /
   ``tollgate-module-basic-go``.
2. Deprecated ``package_name`` tag contains ``tollgate-module-basic-go``.
3. A non-empty deprecated ``tollgate_os_version`` tag.
4. Case-insensitive keyword scan over content, download URL and
   ``filename`` tag: ``basic`` or ``module`` before ``core``.
5. Default: ``tollgate-os``.
"""

from __future__ import annotations

from typing import Final

from tollgate_explorer.models.constants import ProductType
from tollgate_explorer.models.release import Release  # noqa: TC001


# Order matters: "tollgate-os" is checked before the longer names.
_NAME_MARKERS: Final[tuple[ProductType, ...]] = (
    ProductType.TOLLGATE_OS,
    ProductType.TOLLGATE_CORE,
    ProductType.TOLLGATE_BASIC,
)

_BASIC_KEYWORDS: Final[tuple[str, ...]] = ("basic", "module")
_CORE_KEYWORDS: Final[tuple[str, ...]] = ("core",)


def tag_text(release: Release, name: str) -> str | None:
    """Return the first non-empty value of tag *name*, or ``None``."""
    return release.tag_value(name) or None


def classify_product(release: Release) -> ProductType:
    """Infer the [ProductType][tollgate_explorer.models.constants.ProductType] of *release*.

    Total and deterministic: malformed or missing tags simply let
    evaluation fall through to the next rule.

    Examples:
        ```python
        r = Release(id="a", tags=[["name", "tollgate-core"]], content="basic")
        classify_product(r)   # ProductType.TOLLGATE_CORE
        ```
    """
    name = tag_text(release, "name")
    if name:
        for product in _NAME_MARKERS:
            if product.value in name:
                return product

    package_name = tag_text(release, "package_name")
    if package_name and ProductType.TOLLGATE_BASIC.value in package_name:
        return ProductType.TOLLGATE_BASIC

    if tag_text(release, "tollgate_os_version"):
        return ProductType.TOLLGATE_OS

    haystacks = tuple(
        text.lower()
        for text in (
            release.content,
            tag_text(release, "url"),
            tag_text(release, "filename"),
        )
        if text
    )
    if _contains_any(haystacks, _BASIC_KEYWORDS):
        return ProductType.TOLLGATE_BASIC
    if _contains_any(haystacks, _CORE_KEYWORDS):
        return ProductType.TOLLGATE_CORE

    return ProductType.TOLLGATE_OS


def _contains_any(haystacks: tuple[str, ...], keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for text in haystacks for keyword in keywords)

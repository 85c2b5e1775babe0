"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by the ``__post_init__``
methods of sibling model modules to enforce runtime type constraints.
"""

from __future__ import annotations

from typing import Any


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_timestamp(value: Any, name: str) -> None:
    """Raise if *value* is not a non-negative ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def validate_str_set(value: Any, name: str) -> frozenset[str]:
    """Coerce an iterable of strings into a ``frozenset``.

    A bare ``str`` is rejected because iterating it would silently split
    the value into characters.
    """
    if isinstance(value, str):
        raise TypeError(f"{name} must be a collection of str, got str")
    try:
        items = frozenset(value)
    except TypeError:
        raise TypeError(f"{name} must be a collection of str, got {type(value).__name__}") from None
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"{name} items must be str, got {type(item).__name__}")
    return items

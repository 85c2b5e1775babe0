"""
Fixed-shape record for a single Nostr event tag.

Raw tags arrive as loosely-typed JSON arrays (``["url", "https://..."]``).
[Tag][tollgate_explorer.models.tag.Tag] gives them an explicit
``(name, value, extra)`` shape so accessors never index into raw arrays.

See Also:
    [Release][tollgate_explorer.models.release.Release]: Holds an ordered
        tuple of tags and resolves the first match by name.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ._validation import validate_instance


@dataclass(frozen=True, slots=True)
class Tag:
    """Immutable Nostr tag.

    Attributes:
        name: Tag name (first array element), e.g. ``"url"`` or ``"x"``.
        value: Second array element, or ``""`` for a name-only tag.
        extra: Any remaining elements, in order.

    Examples:
        ```python
        Tag.parse(["url", "https://example.com/fw.bin"])
        # Tag(name='url', value='https://example.com/fw.bin', extra=())
        Tag.parse([])      # None
        Tag.parse("url")   # None
        ```
    """

    name: str
    value: str = ""
    extra: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_instance(self.name, str, "name")
        validate_instance(self.value, str, "value")
        validate_instance(self.extra, tuple, "extra")

    @classmethod
    def parse(cls, raw: Any) -> Tag | None:
        """Build a tag from a raw tag array, or ``None`` if it is malformed.

        A raw tag is malformed when it is not a list/tuple, is empty, or
        contains anything other than strings. Strings themselves are
        rejected even though they are sequences.
        """
        if isinstance(raw, Tag):
            return raw
        if isinstance(raw, str) or not isinstance(raw, Sequence) or not raw:
            return None
        if not all(isinstance(item, str) for item in raw):
            return None
        name, *rest = raw
        value = rest[0] if rest else ""
        return cls(name=name, value=value, extra=tuple(rest[1:]))

    def to_list(self) -> list[str]:
        """Return the tag as a raw JSON-style array."""
        return [self.name, self.value, *self.extra]

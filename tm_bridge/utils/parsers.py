"""Parser helpers for core tag data."""

import unicodedata
from collections.abc import Mapping
from typing import Any

from tm_bridge.models.tags import TagInfo, TagsWithStats


def _parse_tags_with_stats(raw: TagsWithStats | Mapping[str, Any]) -> TagsWithStats:
    """
    Parse a core tag-statistics response into a TagsWithStats model.

    Args:
        raw: Model instance or camelCase mapping returned by the core

    Returns:
        TagsWithStats instance with validated data
    """
    if isinstance(raw, TagsWithStats):
        return raw
    return TagsWithStats.model_validate(raw)


# Root collation order for ASCII punctuation and symbols, all before digits
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def _primary_weight(char: str) -> tuple[int, int]:
    if char.isspace():
        return (0, 0)
    rank = _PUNCTUATION_ORDER.find(char)
    if rank >= 0:
        return (1, rank)
    if char.isdigit():
        return (3, unicodedata.digit(char, 0))
    if char.isalpha():
        return (4, ord(char))
    return (2, ord(char))


def _collation_key(name: str) -> tuple[tuple[tuple[int, int], ...], str, str, str]:
    """
    Sort key following Unicode root collation for tag names.

    Whitespace sorts before punctuation, punctuation before symbols, symbols
    before digits and digits before letters ("tag_b" < "tag-b" < "tag1" <
    "tagb"). Accents and case are ignored first; ties then order accented
    after plain and lowercase before uppercase, with the raw name last.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return (tuple(_primary_weight(c) for c in base), name.casefold(), name.swapcase(), name)


def _sort_tags(tags: list[TagInfo]) -> list[TagInfo]:
    """
    Order tags with the current tag first and the rest by name.

    Args:
        tags: Tags in core order

    Returns:
        New list; the input is left untouched
    """
    return sorted(tags, key=lambda tag: (not tag.is_current, _collation_key(tag.name)))

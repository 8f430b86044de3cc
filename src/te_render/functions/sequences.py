"""Sequence and grouped-mapping helpers exposed to templates."""

from __future__ import annotations

from collections.abc import Sequence

GroupedMapping = dict[str, list[str]]


def index(items: Sequence[str], i: int) -> str:
    """Element at 1-based position ``i``; negative ``i`` counts from the end.

    ``Index(xs, 1)`` is the first element and ``Index(xs, -1)`` the last.

    Raises:
        ValueError: If ``i`` is zero.
        IndexError: If ``i`` falls outside the sequence in either direction.
    """
    length = len(items)
    if i == 0:
        raise ValueError("index 0 is invalid")
    if i > length or -i > length:
        raise IndexError(f"index {i} is out of range, length is {length}")
    if i < 0:
        return items[length + i]
    return items[i - 1]


def append(items: Sequence[str], value: str) -> list[str]:
    """New list with ``value`` added at the end; ``items`` is left as is."""
    return [*items, value]


def map_new() -> GroupedMapping:
    """New empty grouped mapping."""
    return {}


def map_append(mapping: GroupedMapping, key: str, value: str) -> GroupedMapping:
    """Add ``value`` to the group at ``key`` and return the mapping.

    The mapping is updated in place; use the returned mapping.
    """
    mapping.setdefault(key, []).append(value)
    return mapping

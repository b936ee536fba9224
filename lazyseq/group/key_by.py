"""
Grouping terminals
==================

Eager: each function drains its input exactly once and returns a dict.
Keys come out in first-seen order (dicts keep insertion order), and
grouped lists keep source order.

map_key_* functions produce both the key and the stored value in one call;
key_* functions store the element itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._helpers import ensure_iterable
from .._types import Selector


# ============================================================================
# Mapped variants
# ============================================================================


def map_key_by[T, K, V](
    items: Iterable[T],
    mapper: Callable[[T, int], tuple[K, V]],
) -> dict[K, list[V]]:
    """Group mapped values by mapped key: mapper(element, index) -> (key, value)."""
    ensure_iterable(items, operation="map_key_by")
    groups: dict[K, list[V]] = {}
    for index, element in enumerate(items):
        key, value = mapper(element, index)
        groups.setdefault(key, []).append(value)
    return groups


def map_key_first_by[T, K, V](
    items: Iterable[T],
    mapper: Callable[[T, int], tuple[K, V]],
) -> dict[K, V]:
    """Keep the first mapped value per key."""
    ensure_iterable(items, operation="map_key_first_by")
    firsts: dict[K, V] = {}
    for index, element in enumerate(items):
        key, value = mapper(element, index)
        if key not in firsts:
            firsts[key] = value
    return firsts


def map_key_last_by[T, K, V](
    items: Iterable[T],
    mapper: Callable[[T, int], tuple[K, V]],
) -> dict[K, V]:
    """
    Keep the last mapped value per key.

    NOTE: Overwriting a dict entry keeps its position, so key order is still
          first-seen order.
    """
    ensure_iterable(items, operation="map_key_last_by")
    lasts: dict[K, V] = {}
    for index, element in enumerate(items):
        key, value = mapper(element, index)
        lasts[key] = value
    return lasts


# ============================================================================
# Element variants
# ============================================================================


def _keyed[T, K](selector: Selector[T, K]) -> Callable[[T, int], tuple[K, T]]:
    def pair(element: T, index: int) -> tuple[K, T]:
        return selector(element, index), element
    return pair


def key_by[T, K](items: Iterable[T], selector: Selector[T, K]) -> dict[K, list[T]]:
    """
    Group elements by selector(element, index).

    Example:
        key_by([1, 3, 4, 2, 5, 6], lambda e, _: "even" if e % 2 == 0 else "odd")
        # {"odd": [1, 3, 5], "even": [4, 2, 6]}
    """
    ensure_iterable(items, operation="key_by")
    return map_key_by(items, _keyed(selector))


def key_first_by[T, K](items: Iterable[T], selector: Selector[T, K]) -> dict[K, T]:
    """First element per key."""
    ensure_iterable(items, operation="key_first_by")
    return map_key_first_by(items, _keyed(selector))


def key_last_by[T, K](items: Iterable[T], selector: Selector[T, K]) -> dict[K, T]:
    """Last element per key."""
    ensure_iterable(items, operation="key_last_by")
    return map_key_last_by(items, _keyed(selector))


__all__ = (
    "key_by",
    "key_first_by",
    "key_last_by",
    "map_key_by",
    "map_key_first_by",
    "map_key_last_by",
)

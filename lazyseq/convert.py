"""Realize a lazy sequence into a container."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from ._helpers import ensure_iterable

def to_list[T](items: Iterable[T]) -> list[T]:
    ensure_iterable(items, operation="to_list")
    return list(items)

def to_set[T: Hashable](items: Iterable[T]) -> set[T]:
    ensure_iterable(items, operation="to_set")
    return set(items)

__all__ = ("to_list", "to_set")

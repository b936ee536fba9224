"""Bounded sub-sequences

Position-based windows over a source: slice, take, drop."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice

from .._helpers import check_bound, ensure_iterable

def slice[T](items: Iterable[T], start: int = 0, end: int | None = None) -> Iterator[T]:
    """
    Elements from position start up to (not including) end.

    Skipping stops silently if the source runs out first. The source is never
    advanced past position end - 1, so take() on a generator leaves the rest
    of it unconsumed.

    Out-of-range bounds clamp instead of failing: a negative start counts
    as 0, and end <= start gives an empty result without touching the source.
    """
    ensure_iterable(items, operation="slice")
    check_bound("start", start, "slice")
    if end is not None:
        check_bound("end", end, "slice")
    lower = max(start, 0)

    def run() -> Iterator[T]:
        if end is not None and end <= lower:
            return
        yield from islice(items, lower, end)

    return run()

def take[T](items: Iterable[T], n: int) -> Iterator[T]:
    """First n elements."""
    ensure_iterable(items, operation="take")
    return slice(items, 0, n)

def drop[T](items: Iterable[T], n: int) -> Iterator[T]:
    """Everything after the first n elements."""
    ensure_iterable(items, operation="drop")
    return slice(items, n)

__all__ = ("slice", "take", "drop")

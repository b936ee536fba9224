"""
Fold combinators
================

Левые свёртки: fold/fold1 сворачивают последовательность в значение,
scan/scan1 отдают каждое промежуточное состояние лениво.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kungfu import Option

from .._helpers import ensure_iterable
from .._types import Reducer
from ..access.position import last


# ============================================================================
# Seeded
# ============================================================================


def fold[A, T](
    items: Iterable[T],
    reducer: Reducer[A, T],
    *,
    initial: A,
) -> A:
    """Strict left fold: reducer(acc, element, index) over every element."""
    ensure_iterable(items, operation="fold")
    acc = initial
    for index, element in enumerate(items):
        acc = reducer(acc, element, index)
    return acc


def scan[A, T](
    items: Iterable[T],
    reducer: Reducer[A, T],
    *,
    initial: A,
) -> Iterator[A]:
    """
    Lazy fold that yields the accumulator after every element.

    One output per input element; initial itself is not yielded.

    Example:
        to_list(scan([1, 2, 3], lambda a, e, i: a + e * i, initial=0))  # [0, 2, 8]
    """
    ensure_iterable(items, operation="scan")

    def run() -> Iterator[A]:
        acc = initial
        for index, element in enumerate(items):
            acc = reducer(acc, element, index)
            yield acc

    return run()


# ============================================================================
# Seeded by the first element
# ============================================================================


def scan1[T](items: Iterable[T], reducer: Reducer[T, T]) -> Iterator[T]:
    """
    Like scan(), seeded with the first element.

    The first element is yielded unchanged and never passed to reducer.
    Reducer indices start at 1, the position of the second element.

    Example:
        to_list(scan1([1, 2, 3], lambda a, e, i: a + e * i))  # [1, 3, 9]
    """
    ensure_iterable(items, operation="scan1")

    def run() -> Iterator[T]:
        iterator = iter(items)
        try:
            acc = next(iterator)
        except StopIteration:
            return
        yield acc
        for index, element in enumerate(iterator, start=1):
            acc = reducer(acc, element, index)
            yield acc

    return run()


def fold1[T](items: Iterable[T], reducer: Reducer[T, T]) -> Option[T]:
    """
    Like fold(), seeded with the first element. Nothing on empty input.

    Implemented as last(scan1()).
    """
    ensure_iterable(items, operation="fold1")
    return last(scan1(items, reducer))


__all__ = ("fold", "fold1", "scan", "scan1")

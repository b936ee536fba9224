"""
Search combinators
==================

Linear search and selection of extremes. All of these stop as early as the
answer is known, except maximum/minimum which have to see everything.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._helpers import ensure_iterable, equals
from .._types import Comparator, Predicate
from .fold import fold1
from .logic import any


# ============================================================================
# Ordering
# ============================================================================


def natural_order(a: typing.Any, b: typing.Any) -> int:
    """
    Default comparator: -1, 0 or 1 by the values' own < and >.

    Works for numbers, strings (lexicographic), booleans and anything
    else that defines rich comparisons.
    """
    return (a > b) - (a < b)


# ============================================================================
# Membership
# ============================================================================


def contains[T](items: Iterable[T], value: T) -> bool:
    """True if some element == value."""
    ensure_iterable(items, operation="contains")
    return any(items, equals(value))


def find[T](items: Iterable[T], predicate: Predicate[T]) -> Option[T]:
    """First element satisfying predicate, or Nothing."""
    ensure_iterable(items, operation="find")
    for index, element in enumerate(items):
        if predicate(element, index):
            return Some(element)
    return Nothing()


def find_index[T](items: Iterable[T], predicate: Predicate[T]) -> Option[int]:
    """Position of the first element satisfying predicate, or Nothing."""
    ensure_iterable(items, operation="find_index")
    for index, element in enumerate(items):
        if predicate(element, index):
            return Some(index)
    return Nothing()


def index_of[T](items: Iterable[T], value: T) -> Option[int]:
    """Position of the first element == value, or Nothing."""
    ensure_iterable(items, operation="index_of")
    return find_index(items, equals(value))


# ============================================================================
# Extremes
# ============================================================================


def maximum[T](items: Iterable[T], compare: Comparator[T] | None = None) -> Option[T]:
    """
    Greatest element, or Nothing if the sequence is empty.

    Replaces the running maximum only on a strictly greater element, so the
    first of several equal maxima is returned.

    Example:
        maximum([1, 2, 3, 4, 3, 2, 1])                # Some(4)
        maximum(words, lambda a, b: len(a) - len(b))  # first longest word
    """
    ensure_iterable(items, operation="maximum")
    order = compare if compare is not None else natural_order

    def keep_greater(best: T, element: T, index: int) -> T:
        _ = index
        return element if order(element, best) > 0 else best

    return fold1(items, keep_greater)


def minimum[T](items: Iterable[T], compare: Comparator[T] | None = None) -> Option[T]:
    """Least element, or Nothing. First of several equal minima wins."""
    ensure_iterable(items, operation="minimum")
    order = compare if compare is not None else natural_order

    def keep_lesser(best: T, element: T, index: int) -> T:
        _ = index
        return element if order(element, best) < 0 else best

    return fold1(items, keep_lesser)


__all__ = (
    "natural_order",
    "contains",
    "find",
    "find_index",
    "index_of",
    "maximum",
    "minimum",
)

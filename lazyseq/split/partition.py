"""Partition combinators

Derive two lazy sequences from one source, sharing a SplitCursor."""

from __future__ import annotations

from collections.abc import Iterable

from .._helpers import check_bound, ensure_iterable
from .._types import Predicate
from .cursor import Side, SplitCursor, SplitSide

def split[T](items: Iterable[T], index: int) -> tuple[SplitSide[T], SplitSide[T]]:
    """
    Split by position: (first index elements, the rest).

    Same result as (take(items, index), drop(items, index)) but reads the
    source once, so it works on generators.
    """
    ensure_iterable(items, operation="split")
    check_bound("index", index, "split")

    def route(element: T, position: int) -> Side:
        _ = element
        return "left" if position < index else "right"

    return SplitCursor(items, route, left_is_prefix=True, left_limit=index).sides()

def partition[T](items: Iterable[T], predicate: Predicate[T]) -> tuple[SplitSide[T], SplitSide[T]]:
    """
    Split by predicate: (elements satisfying it, elements failing it).

    predicate(element, index) runs once per element, with the element's
    position in the source. Both outputs keep source order.

    Example:
        odd, even = partition([2, 1, 3, 4, 5, 6], lambda e, _: e % 2 == 1)
        to_list(odd)   # [1, 3, 5]
        to_list(even)  # [2, 4, 6]
    """
    ensure_iterable(items, operation="partition")

    def route(element: T, position: int) -> Side:
        return "left" if predicate(element, position) else "right"

    return SplitCursor(items, route, left_is_prefix=False).sides()

def partition_while[T](items: Iterable[T], predicate: Predicate[T]) -> tuple[SplitSide[T], SplitSide[T]]:
    """
    Split after the leading run: (take_while(predicate), the rest).

    The first failing element and everything after it go right, whether or
    not later elements satisfy predicate. predicate is not called again
    after the first failure.

    Example:
        run, rest = partition_while([1, 3, 2, 4, 5, 6], lambda e, _: e % 2 == 1)
        to_list(run)   # [1, 3]
        to_list(rest)  # [2, 4, 5, 6]
    """
    ensure_iterable(items, operation="partition_while")

    def route(element: T, position: int) -> Side:
        return "left" if predicate(element, position) else "right"

    return SplitCursor(items, route, left_is_prefix=True).sides()

__all__ = ("split", "partition", "partition_while")

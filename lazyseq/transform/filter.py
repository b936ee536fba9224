"""
Filter combinators
==================

Фильтрация элементов по предикату и по значению.

Two families:
- filter / exclude / remove apply to the whole sequence.
- filter_first / exclude_first / remove_first drop exactly one element:
  the first one the rule rejects. Everything after it passes unfiltered.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from .._helpers import ensure_iterable, equals, negate
from .._types import Predicate


# ============================================================================
# Whole-sequence filters
# ============================================================================


def filter[T](items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Keep elements satisfying predicate(element, index)."""
    ensure_iterable(items, operation="filter")

    def run() -> Iterator[T]:
        for index, element in enumerate(items):
            if predicate(element, index):
                yield element

    return run()


def exclude[T](items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Drop elements satisfying predicate. Dual of filter()."""
    ensure_iterable(items, operation="exclude")
    return filter(items, negate(predicate))


def exclude_none[T](items: Iterable[T | None]) -> Iterator[T]:
    """Drop None elements."""
    ensure_iterable(items, operation="exclude_none")
    return typing.cast(Iterator[T], exclude(items, lambda element, _: element is None))


def remove[T](items: Iterable[T], value: T) -> Iterator[T]:
    """Drop every element equal to value."""
    ensure_iterable(items, operation="remove")
    return exclude(items, equals(value))


# ============================================================================
# First-rejection filters
# ============================================================================


def filter_first[T](items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """
    Drop the first element that fails predicate, keep everything else.

    The predicate is only consulted up to and including the first failure;
    after that, elements pass through untested.

    Example:
        to_list(filter_first([1, 2, 3, 4, 3, 2, 1], lambda e, _: e < 3))
        # [1, 2, 4, 3, 2, 1]

    NOTE: Only the first rejected element is dropped. The later 3 survives
          even though it fails the predicate too.
    """
    ensure_iterable(items, operation="filter_first")

    def run() -> Iterator[T]:
        filtering = True
        for index, element in enumerate(items):
            if filtering and not predicate(element, index):
                filtering = False
                continue
            yield element

    return run()


def exclude_first[T](items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Drop the first element that satisfies predicate. Dual of filter_first()."""
    ensure_iterable(items, operation="exclude_first")
    return filter_first(items, negate(predicate))


def remove_first[T](items: Iterable[T], value: T) -> Iterator[T]:
    """Drop the first element equal to value."""
    ensure_iterable(items, operation="remove_first")
    return exclude_first(items, equals(value))


__all__ = (
    "filter",
    "exclude",
    "exclude_none",
    "remove",
    "filter_first",
    "exclude_first",
    "remove_first",
)

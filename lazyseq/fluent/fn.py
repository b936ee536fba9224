"""
Curried forms
=============

Каждая функция принимает всё, кроме последовательности, и возвращает
функцию, которая ждёт последовательность. Удобно для pipe():

    pipe(
        range(10),
        filter_fn(lambda e, _: e % 2 == 0),
        map_fn(lambda e, _: e * e),
        take_fn(3),
        to_list,
    )  # [0, 4, 16]
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Option

from .._types import Comparator, Effect, Mapper, Predicate, Reducer, Selector, Stage
from ..access.position import nth
from ..combine.concat import concat_map, push, unshift
from ..combine.zip import zip
from ..group.key_by import (
    key_by,
    key_first_by,
    key_last_by,
    map_key_by,
    map_key_first_by,
    map_key_last_by,
)
from ..reduce.fold import fold, fold1, scan, scan1
from ..reduce.logic import all, any
from ..reduce.search import contains, find, find_index, index_of, maximum, minimum
from ..slicing.bounds import drop, slice, take
from ..slicing.runs import drop_while, take_while
from ..split.cursor import SplitSide
from ..split.partition import partition, partition_while, split
from ..transform.effects import tap
from ..transform.filter import exclude, exclude_first, filter, filter_first, remove, remove_first
from ..transform.map import map


# ============================================================================
# Composition
# ============================================================================


def pipe(value: typing.Any, *stages: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """Feed value through stages, left to right."""
    for stage in stages:
        value = stage(value)
    return value


# ============================================================================
# Sub-sequences
# ============================================================================


def slice_fn[T](start: int = 0, end: int | None = None) -> Stage[T, Iterator[T]]:
    return lambda items: slice(items, start, end)


def take_fn[T](n: int) -> Stage[T, Iterator[T]]:
    return lambda items: take(items, n)


def drop_fn[T](n: int) -> Stage[T, Iterator[T]]:
    return lambda items: drop(items, n)


def take_while_fn[T](predicate: Predicate[T]) -> Stage[T, Iterator[T]]:
    return lambda items: take_while(items, predicate)


def drop_while_fn[T](predicate: Predicate[T]) -> Stage[T, Iterator[T]]:
    return lambda items: drop_while(items, predicate)


def nth_fn[T](index: int) -> Stage[T, Option[T]]:
    return lambda items: nth(items, index)


# ============================================================================
# Elementwise
# ============================================================================


def map_fn[T, R](mapper: Mapper[T, R]) -> Stage[T, Iterator[R]]:
    return lambda items: map(items, mapper)


def filter_fn[T](predicate: Predicate[T]) -> Stage[T, Iterator[T]]:
    return lambda items: filter(items, predicate)


def exclude_fn[T](predicate: Predicate[T]) -> Stage[T, Iterator[T]]:
    return lambda items: exclude(items, predicate)


def filter_first_fn[T](predicate: Predicate[T]) -> Stage[T, Iterator[T]]:
    return lambda items: filter_first(items, predicate)


def exclude_first_fn[T](predicate: Predicate[T]) -> Stage[T, Iterator[T]]:
    return lambda items: exclude_first(items, predicate)


def remove_fn[T](value: T) -> Stage[T, Iterator[T]]:
    return lambda items: remove(items, value)


def remove_first_fn[T](value: T) -> Stage[T, Iterator[T]]:
    return lambda items: remove_first(items, value)


def tap_fn[T](effect: Effect[T]) -> Stage[T, Iterator[T]]:
    return lambda items: tap(items, effect)


# ============================================================================
# Reductions
# ============================================================================


def fold_fn[A, T](reducer: Reducer[A, T], *, initial: A) -> Stage[T, A]:
    return lambda items: fold(items, reducer, initial=initial)


def fold1_fn[T](reducer: Reducer[T, T]) -> Stage[T, Option[T]]:
    return lambda items: fold1(items, reducer)


def scan_fn[A, T](reducer: Reducer[A, T], *, initial: A) -> Stage[T, Iterator[A]]:
    return lambda items: scan(items, reducer, initial=initial)


def scan1_fn[T](reducer: Reducer[T, T]) -> Stage[T, Iterator[T]]:
    return lambda items: scan1(items, reducer)


def any_fn[T](predicate: Predicate[T]) -> Stage[T, bool]:
    return lambda items: any(items, predicate)


def all_fn[T](predicate: Predicate[T]) -> Stage[T, bool]:
    return lambda items: all(items, predicate)


def contains_fn[T](value: T) -> Stage[T, bool]:
    return lambda items: contains(items, value)


def find_fn[T](predicate: Predicate[T]) -> Stage[T, Option[T]]:
    return lambda items: find(items, predicate)


def find_index_fn[T](predicate: Predicate[T]) -> Stage[T, Option[int]]:
    return lambda items: find_index(items, predicate)


def index_of_fn[T](value: T) -> Stage[T, Option[int]]:
    return lambda items: index_of(items, value)


def maximum_fn[T](compare: Comparator[T] | None = None) -> Stage[T, Option[T]]:
    return lambda items: maximum(items, compare)


def minimum_fn[T](compare: Comparator[T] | None = None) -> Stage[T, Option[T]]:
    return lambda items: minimum(items, compare)


# ============================================================================
# Combinators
# ============================================================================


def concat_map_fn[T, R](mapper: Mapper[T, Iterable[R]]) -> Stage[T, Iterator[R]]:
    return lambda items: concat_map(items, mapper)


def zip_fn[A, B](second: Iterable[B]) -> Stage[A, Iterator[tuple[A, B]]]:
    """zip_fn(second)(first) == zip(first, second)."""
    return lambda items: zip(items, second)


def push_fn[T](value: T) -> Stage[T, Iterator[T]]:
    return lambda items: push(items, value)


def unshift_fn[T](value: T) -> Stage[T, Iterator[T]]:
    return lambda items: unshift(items, value)


# ============================================================================
# Splitting
# ============================================================================


def split_fn[T](index: int) -> Stage[T, tuple[SplitSide[T], SplitSide[T]]]:
    return lambda items: split(items, index)


def partition_fn[T](predicate: Predicate[T]) -> Stage[T, tuple[SplitSide[T], SplitSide[T]]]:
    return lambda items: partition(items, predicate)


def partition_while_fn[T](predicate: Predicate[T]) -> Stage[T, tuple[SplitSide[T], SplitSide[T]]]:
    return lambda items: partition_while(items, predicate)


# ============================================================================
# Grouping
# ============================================================================


def key_by_fn[T, K](selector: Selector[T, K]) -> Stage[T, dict[K, list[T]]]:
    return lambda items: key_by(items, selector)


def key_first_by_fn[T, K](selector: Selector[T, K]) -> Stage[T, dict[K, T]]:
    return lambda items: key_first_by(items, selector)


def key_last_by_fn[T, K](selector: Selector[T, K]) -> Stage[T, dict[K, T]]:
    return lambda items: key_last_by(items, selector)


def map_key_by_fn[T, K, V](mapper: Callable[[T, int], tuple[K, V]]) -> Stage[T, dict[K, list[V]]]:
    return lambda items: map_key_by(items, mapper)


def map_key_first_by_fn[T, K, V](mapper: Callable[[T, int], tuple[K, V]]) -> Stage[T, dict[K, V]]:
    return lambda items: map_key_first_by(items, mapper)


def map_key_last_by_fn[T, K, V](mapper: Callable[[T, int], tuple[K, V]]) -> Stage[T, dict[K, V]]:
    return lambda items: map_key_last_by(items, mapper)


__all__ = (
    # Composition
    "pipe",
    # Sub-sequences
    "slice_fn",
    "take_fn",
    "drop_fn",
    "take_while_fn",
    "drop_while_fn",
    "nth_fn",
    # Elementwise
    "map_fn",
    "filter_fn",
    "exclude_fn",
    "filter_first_fn",
    "exclude_first_fn",
    "remove_fn",
    "remove_first_fn",
    "tap_fn",
    # Reductions
    "fold_fn",
    "fold1_fn",
    "scan_fn",
    "scan1_fn",
    "any_fn",
    "all_fn",
    "contains_fn",
    "find_fn",
    "find_index_fn",
    "index_of_fn",
    "maximum_fn",
    "minimum_fn",
    # Combinators
    "concat_map_fn",
    "zip_fn",
    "push_fn",
    "unshift_fn",
    # Splitting
    "split_fn",
    "partition_fn",
    "partition_while_fn",
    # Grouping
    "key_by_fn",
    "key_first_by_fn",
    "key_last_by_fn",
    "map_key_by_fn",
    "map_key_first_by_fn",
    "map_key_last_by_fn",
)

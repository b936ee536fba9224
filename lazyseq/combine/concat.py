"""
Concat combinators
==================

Склейка последовательностей. prepend/append каррированы: сначала
"добавка", потом основная последовательность, чтобы их можно было
ставить в pipe().
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import ensure_iterable
from .._types import Mapper
from ..transform.map import map


def concat[T](sequences: Iterable[Iterable[T]]) -> Iterator[T]:
    """
    Flatten one level, in order.

    Each inner sequence is drained completely before the next one is
    pulled from the outer sequence.
    """
    ensure_iterable(sequences, operation="concat")

    def run() -> Iterator[T]:
        for inner in sequences:
            yield from ensure_iterable(inner, operation="concat")

    return run()


def concat_map[T, R](items: Iterable[T], mapper: Mapper[T, Iterable[R]]) -> Iterator[R]:
    """
    Map every element to a sequence and flatten the results.

    Example:
        to_list(concat_map(["1,2", "3"], lambda s, _: s.split(",")))  # ["1", "2", "3"]
    """
    ensure_iterable(items, operation="concat_map")
    return concat(map(items, mapper))


def prepend[T](extra: Iterable[T]) -> Callable[[Iterable[T]], Iterator[T]]:
    """
    prepend(extra)(items) yields extra, then items.

    Example:
        pipe([4, 5], prepend([1, 2]), to_list)  # [1, 2, 4, 5]
    """
    ensure_iterable(extra, operation="prepend")

    def apply(items: Iterable[T]) -> Iterator[T]:
        ensure_iterable(items, operation="prepend")
        return concat((extra, items))

    return apply


def append[T](extra: Iterable[T]) -> Callable[[Iterable[T]], Iterator[T]]:
    """append(extra)(items) yields items, then extra."""
    ensure_iterable(extra, operation="append")

    def apply(items: Iterable[T]) -> Iterator[T]:
        ensure_iterable(items, operation="append")
        return concat((items, extra))

    return apply


def push[T](items: Iterable[T], value: T) -> Iterator[T]:
    """Sequence followed by one extra element."""
    ensure_iterable(items, operation="push")
    return append((value,))(items)


def unshift[T](items: Iterable[T], value: T) -> Iterator[T]:
    """One extra element followed by the sequence."""
    ensure_iterable(items, operation="unshift")
    return prepend((value,))(items)


__all__ = ("concat", "concat_map", "prepend", "append", "push", "unshift")

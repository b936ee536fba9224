"""Zip combinators

Lockstep iteration over two sequences, and over adjacent elements of one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._helpers import ensure_iterable

def zip[A, B](first: Iterable[A], second: Iterable[B]) -> Iterator[tuple[A, B]]:
    """
    Pairs of elements at the same position. The shorter sequence wins.

    first is always advanced before second, and second is never advanced
    once first has run out.
    """
    ensure_iterable(first, operation="zip")
    ensure_iterable(second, operation="zip")

    def run() -> Iterator[tuple[A, B]]:
        left = iter(first)
        right = iter(second)
        while True:
            try:
                a = next(left)
            except StopIteration:
                return
            try:
                b = next(right)
            except StopIteration:
                return
            yield a, b

    return run()

def pairwise[T](items: Iterable[T]) -> Iterator[tuple[T, T]]:
    """
    Adjacent (previous, current) pairs.

    n elements give max(0, n - 1) pairs.
    """
    ensure_iterable(items, operation="pairwise")

    def run() -> Iterator[tuple[T, T]]:
        iterator = iter(items)
        try:
            previous = next(iterator)
        except StopIteration:
            return
        for element in iterator:
            yield previous, element
            previous = element

    return run()

__all__ = ("zip", "pairwise")

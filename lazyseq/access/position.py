"""
Positional accessors
====================

Доступ к элементам по позиции. Каждый аксессор продвигает источник
ровно настолько, насколько нужно для ответа.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from kungfu import Nothing, Option, Some

from .._helpers import ensure_iterable
from ..slicing.bounds import drop, slice


# ============================================================================
# Single values
# ============================================================================


def first[T](items: Iterable[T]) -> Option[T]:
    """
    First element, or Nothing if the sequence is empty.

    Advances the source once.
    """
    ensure_iterable(items, operation="first")
    for element in items:
        return Some(element)
    return Nothing()


def last[T](items: Iterable[T]) -> Option[T]:
    """
    Last element, or Nothing if the sequence is empty.

    Drains the source, keeping only the most recent element.

    **Caution**: never returns for infinite inputs.
    """
    ensure_iterable(items, operation="last")
    tail_window = deque(items, maxlen=1)
    if tail_window:
        return Some(tail_window.pop())
    return Nothing()


def only[T](items: Iterable[T]) -> Option[T]:
    """
    The element of a one-element sequence.

    Advances the source at most twice, so "exactly one" is told apart from
    "one or more": both empty and longer sequences give Nothing.

    Example:
        only([7])     # Some(7)
        only([7, 8])  # Nothing()
    """
    ensure_iterable(items, operation="only")
    iterator = iter(items)
    for element in iterator:
        for _ in iterator:
            return Nothing()
        return Some(element)
    return Nothing()


def nth[T](items: Iterable[T], index: int) -> Option[T]:
    """Element at zero-based index, or Nothing if the sequence is shorter."""
    ensure_iterable(items, operation="nth")
    if index < 0:
        return Nothing()
    return first(drop(items, index))


def empty(items: Iterable[object]) -> bool:
    """
    True if the sequence has no elements.

    NOTE: Consumes the first element of a single-pass source. Don't reuse
          a generator after asking whether it is empty.
    """
    ensure_iterable(items, operation="empty")
    for _ in items:
        return False
    return True


# ============================================================================
# Lazy views
# ============================================================================


def initial[T](items: Iterable[T]) -> Iterator[T]:
    """
    All elements except the last.

    Output lags the source by one element: a value is yielded only once
    its successor has been seen.
    """
    ensure_iterable(items, operation="initial")

    def run() -> Iterator[T]:
        iterator = iter(items)
        try:
            held = next(iterator)
        except StopIteration:
            return
        for element in iterator:
            yield held
            held = element

    return run()


def tail[T](items: Iterable[T]) -> Iterator[T]:
    """All elements except the first."""
    ensure_iterable(items, operation="tail")
    return slice(items, 1)


__all__ = ("first", "last", "only", "nth", "empty", "initial", "tail")

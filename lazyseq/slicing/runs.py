"""Leading-run combinators

Sub-sequences bounded by a predicate instead of a position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._helpers import ensure_iterable
from .._types import Predicate

def take_while[T](items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """
    Leading run of elements satisfying predicate.

    Stops at the first failing element. That element is pulled from the
    source (it has to be, to be tested) but is not yielded.
    """
    ensure_iterable(items, operation="take_while")

    def run() -> Iterator[T]:
        for index, element in enumerate(items):
            if not predicate(element, index):
                return
            yield element

    return run()

def drop_while[T](items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Skip the leading run satisfying predicate, yield the rest unfiltered."""
    ensure_iterable(items, operation="drop_while")

    def run() -> Iterator[T]:
        dropping = True
        for index, element in enumerate(items):
            if dropping and predicate(element, index):
                continue
            dropping = False
            yield element

    return run()

__all__ = ("take_while", "drop_while")

"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._helpers import ensure_iterable
from .._types import Effect

def tap[T](items: Iterable[T], effect: Effect[T]) -> Iterator[T]:
    """
    Call effect(element, index) as each element passes, yield it unchanged.

    The effect runs on pull, not on construction: nothing is observed until
    something downstream asks for the element.
    """
    ensure_iterable(items, operation="tap")

    def run() -> Iterator[T]:
        for index, element in enumerate(items):
            effect(element, index)
            yield element

    return run()

__all__ = ("tap",)

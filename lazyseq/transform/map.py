"""Map combinator

Elementwise transformation, one call per element."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._helpers import ensure_iterable
from .._types import Mapper

def map[T, R](items: Iterable[T], mapper: Mapper[T, R]) -> Iterator[R]:
    """
    Apply mapper to every element, in order.

    mapper receives (element, index), where index is the position in the
    input sequence.

    Example:
        to_list(map([1, 2, 3], lambda e, i: e * 10 if i == 1 else e))  # [1, 20, 3]
    """
    ensure_iterable(items, operation="map")

    def run() -> Iterator[R]:
        for index, element in enumerate(items):
            yield mapper(element, index)

    return run()

__all__ = ("map",)

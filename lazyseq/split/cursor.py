"""
Split cursor
============

Shared state behind split(), partition() and partition_while().

One upstream iterator feeds two buffers. Either side may be pulled first,
fully or alternately: a side replays what is already buffered for it, then
advances the shared upstream, routing every new element into exactly one
buffer until one lands in its own.

Общий курсор продвигается только той стороной, которую сейчас тянут;
один и тот же элемент никогда не читается из источника дважды.

**Caution**: buffers keep every routed element for the lifetime of the
sides, so reading only one side of an infinite source grows the other
buffer without bound.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .._errors import ReentrantPullError

logger = logging.getLogger(__name__)

type Side = typing.Literal["left", "right"]

# Router = (element, index) -> side the element belongs to
type Router[T] = Callable[[T, int], Side]


class SplitCursor[T]:
    """
    Upstream iterator plus left/right buffers.

    With left_is_prefix=True the left side is a leading run of the source:
    once any element has been routed right, the left side is closed and the
    router is no longer consulted. left_limit closes the left side after
    that many elements have been read, without reading the next one.
    """

    __slots__ = (
        "_iterator",
        "_route",
        "_left_is_prefix",
        "_left_limit",
        "_left",
        "_right",
        "_index",
        "_exhausted",
        "_pulling",
        "_failed",
    )

    def __init__(
        self,
        items: Iterable[T],
        route: Router[T],
        *,
        left_is_prefix: bool,
        left_limit: int | None = None,
    ) -> None:
        self._iterator = iter(items)
        self._route = route
        self._left_is_prefix = left_is_prefix
        self._left_limit = left_limit
        self._left: list[T] = []
        self._right: list[T] = []
        self._index = 0
        self._exhausted = False
        self._pulling = False
        self._failed: Exception | None = None

    def buffer(self, side: Side) -> list[T]:
        return self._left if side == "left" else self._right

    def closed(self, side: Side) -> bool:
        """True if no further element can ever be routed to side."""
        if self._exhausted:
            return True
        if side == "right":
            return False
        if self._left_limit is not None and self._index >= self._left_limit:
            return True
        return self._left_is_prefix and bool(self._right)

    def pull(self) -> bool:
        """
        Advance the upstream by one element and buffer it.

        Returns False once the upstream is exhausted. Raises
        ReentrantPullError if called while a pull is already running,
        e.g. from a router that iterates one of the sides.

        If the router raises, the element it was given is lost, so the
        cursor is broken: the error is re-raised by this and every later
        pull instead of silently skipping that element.
        """
        if self._failed is not None:
            raise self._failed
        if self._exhausted:
            return False
        if self._pulling:
            raise ReentrantPullError(self._index)
        self._pulling = True
        try:
            try:
                element = next(self._iterator)
            except StopIteration:
                self._exhausted = True
                logger.debug(
                    "split upstream exhausted after %d elements (left=%d, right=%d)",
                    self._index,
                    len(self._left),
                    len(self._right),
                )
                return False

            if self._left_is_prefix and self._right:
                side: Side = "right"
            else:
                try:
                    side = self._route(element, self._index)
                except Exception as exc:
                    self._failed = exc
                    logger.debug("split router failed at index %d: %r", self._index, exc)
                    raise

            if side == "left":
                self._left.append(element)
            else:
                if self._left_is_prefix and not self._right:
                    logger.debug("split left side closed at index %d", self._index)
                self._right.append(element)
            self._index += 1
            return True
        finally:
            self._pulling = False

    def sides(self) -> tuple[SplitSide[T], SplitSide[T]]:
        return SplitSide(self, "left"), SplitSide(self, "right")


@dataclass(frozen=True, slots=True)
class SplitSide[T]:
    """
    One output of a split cursor.

    Re-iterable: every iteration starts from the beginning of this side's
    buffer, then keeps pulling the shared upstream.
    """

    cursor: SplitCursor[T]
    side: Side

    def __iter__(self) -> Iterator[T]:
        buffer = self.cursor.buffer(self.side)
        position = 0
        while True:
            if position < len(buffer):
                yield buffer[position]
                position += 1
                continue
            if self.cursor.closed(self.side) or not self.cursor.pull():
                return


__all__ = ("Side", "Router", "SplitCursor", "SplitSide")

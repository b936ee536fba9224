"""
AST for fluent sequence chaining.

Architecture:
- Expr[T] - node that lowers into an iterable
- Base wraps the source, Step applies one curried stage to its inner node
- Flow[T] - immutable builder: lazy methods add a Step, terminal methods
  lower the chain and reduce it

Nothing runs while the chain is built. Lowering only composes generators;
elements are computed when the Flow is iterated or a terminal is called.

    flow(range(10)).filter(lambda e, _: e % 2 == 0).map(lambda e, _: e * e).take(3).to_list()
    # [0, 4, 16]
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from kungfu import Option

from ._helpers import ensure_iterable
from ._types import Comparator, Effect, Mapper, Predicate, Reducer, Selector, Stage
from .fluent import fn


# ============================================================================
# Nodes
# ============================================================================


class Expr[T]:
    """
    AST node that can be lowered into an iterable.
    """

    def lower(self) -> Iterable[T]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base[T](Expr[T]):
    items: Iterable[T]

    def lower(self) -> Iterable[T]:
        return self.items


@dataclass(frozen=True, slots=True)
class Step[T, R](Expr[R]):
    inner: Expr[T]
    stage: Stage[T, Iterable[R]]
    name: str

    def lower(self) -> Iterable[R]:
        return self.stage(self.inner.lower())


# ============================================================================
# Builder
# ============================================================================


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """
    Fluent builder for chaining sequence operations.

    Iterating a Flow lowers it. A Flow over a list can be iterated again;
    a Flow over a generator is single-pass like its source.
    """

    expr: Expr[T]

    def _then[R](self, name: str, stage: Stage[T, Iterable[R]]) -> Flow[R]:
        return Flow(Step(self.expr, stage=stage, name=name))

    def __iter__(self) -> Iterator[T]:
        return iter(self.lower())

    def lower(self) -> Iterable[T]:
        return self.expr.lower()

    def stages(self) -> tuple[str, ...]:
        """Names of the lazy steps, source first."""
        names: list[str] = []
        node: Expr[typing.Any] = self.expr
        while isinstance(node, Step):
            names.append(node.name)
            node = node.inner
        return tuple(reversed(names))

    # --------- lazy ----------

    def slice(self, start: int = 0, end: int | None = None) -> Flow[T]:
        return self._then("slice", fn.slice_fn(start, end))

    def take(self, n: int) -> Flow[T]:
        return self._then("take", fn.take_fn(n))

    def drop(self, n: int) -> Flow[T]:
        return self._then("drop", fn.drop_fn(n))

    def take_while(self, predicate: Predicate[T]) -> Flow[T]:
        return self._then("take_while", fn.take_while_fn(predicate))

    def drop_while(self, predicate: Predicate[T]) -> Flow[T]:
        return self._then("drop_while", fn.drop_while_fn(predicate))

    def initial(self) -> Flow[T]:
        from .access.position import initial
        return self._then("initial", initial)

    def tail(self) -> Flow[T]:
        from .access.position import tail
        return self._then("tail", tail)

    def map[R](self, mapper: Mapper[T, R]) -> Flow[R]:
        return self._then("map", fn.map_fn(mapper))

    def filter(self, predicate: Predicate[T]) -> Flow[T]:
        return self._then("filter", fn.filter_fn(predicate))

    def exclude(self, predicate: Predicate[T]) -> Flow[T]:
        return self._then("exclude", fn.exclude_fn(predicate))

    def exclude_none(self) -> Flow[T]:
        from .transform.filter import exclude_none
        return self._then("exclude_none", exclude_none)

    def filter_first(self, predicate: Predicate[T]) -> Flow[T]:
        return self._then("filter_first", fn.filter_first_fn(predicate))

    def exclude_first(self, predicate: Predicate[T]) -> Flow[T]:
        return self._then("exclude_first", fn.exclude_first_fn(predicate))

    def remove(self, value: T) -> Flow[T]:
        return self._then("remove", fn.remove_fn(value))

    def remove_first(self, value: T) -> Flow[T]:
        return self._then("remove_first", fn.remove_first_fn(value))

    def tap(self, effect: Effect[T]) -> Flow[T]:
        return self._then("tap", fn.tap_fn(effect))

    def scan[A](self, reducer: Reducer[A, T], *, initial: A) -> Flow[A]:
        return self._then("scan", fn.scan_fn(reducer, initial=initial))

    def scan1(self, reducer: Reducer[T, T]) -> Flow[T]:
        return self._then("scan1", fn.scan1_fn(reducer))

    def concat[R](self: Flow[Iterable[R]]) -> Flow[R]:
        from .combine.concat import concat
        return self._then("concat", concat)

    def concat_map[R](self, mapper: Mapper[T, Iterable[R]]) -> Flow[R]:
        return self._then("concat_map", fn.concat_map_fn(mapper))

    def zip[B](self, second: Iterable[B]) -> Flow[tuple[T, B]]:
        return self._then("zip", fn.zip_fn(second))

    def pairwise(self) -> Flow[tuple[T, T]]:
        from .combine.zip import pairwise
        return self._then("pairwise", pairwise)

    def prepend(self, extra: Iterable[T]) -> Flow[T]:
        from .combine.concat import prepend
        return self._then("prepend", prepend(extra))

    def append(self, extra: Iterable[T]) -> Flow[T]:
        from .combine.concat import append
        return self._then("append", append(extra))

    def push(self, value: T) -> Flow[T]:
        return self._then("push", fn.push_fn(value))

    def unshift(self, value: T) -> Flow[T]:
        return self._then("unshift", fn.unshift_fn(value))

    # --------- splitting ----------

    def split(self, index: int) -> tuple[Flow[T], Flow[T]]:
        left, right = fn.split_fn(index)(self.lower())
        return flow(left), flow(right)

    def partition(self, predicate: Predicate[T]) -> tuple[Flow[T], Flow[T]]:
        matched, rest = fn.partition_fn(predicate)(self.lower())
        return flow(matched), flow(rest)

    def partition_while(self, predicate: Predicate[T]) -> tuple[Flow[T], Flow[T]]:
        run, rest = fn.partition_while_fn(predicate)(self.lower())
        return flow(run), flow(rest)

    # --------- terminal ----------

    def first(self) -> Option[T]:
        from .access.position import first
        return first(self.lower())

    def last(self) -> Option[T]:
        from .access.position import last
        return last(self.lower())

    def only(self) -> Option[T]:
        from .access.position import only
        return only(self.lower())

    def nth(self, index: int) -> Option[T]:
        return fn.nth_fn(index)(self.lower())

    def empty(self) -> bool:
        from .access.position import empty
        return empty(self.lower())

    def fold[A](self, reducer: Reducer[A, T], *, initial: A) -> A:
        return fn.fold_fn(reducer, initial=initial)(self.lower())

    def fold1(self, reducer: Reducer[T, T]) -> Option[T]:
        return fn.fold1_fn(reducer)(self.lower())

    def sum(self) -> typing.Any:
        from .reduce.logic import sum
        return sum(self.lower())

    def product(self) -> typing.Any:
        from .reduce.logic import product
        return product(self.lower())

    def and_(self) -> bool:
        from .reduce.logic import and_
        return and_(self.lower())

    def or_(self) -> bool:
        from .reduce.logic import or_
        return or_(self.lower())

    def any(self, predicate: Predicate[T]) -> bool:
        return fn.any_fn(predicate)(self.lower())

    def all(self, predicate: Predicate[T]) -> bool:
        return fn.all_fn(predicate)(self.lower())

    def contains(self, value: T) -> bool:
        return fn.contains_fn(value)(self.lower())

    def find(self, predicate: Predicate[T]) -> Option[T]:
        return fn.find_fn(predicate)(self.lower())

    def find_index(self, predicate: Predicate[T]) -> Option[int]:
        return fn.find_index_fn(predicate)(self.lower())

    def index_of(self, value: T) -> Option[int]:
        return fn.index_of_fn(value)(self.lower())

    def maximum(self, compare: Comparator[T] | None = None) -> Option[T]:
        return fn.maximum_fn(compare)(self.lower())

    def minimum(self, compare: Comparator[T] | None = None) -> Option[T]:
        return fn.minimum_fn(compare)(self.lower())

    def key_by[K](self, selector: Selector[T, K]) -> dict[K, list[T]]:
        return fn.key_by_fn(selector)(self.lower())

    def key_first_by[K](self, selector: Selector[T, K]) -> dict[K, T]:
        return fn.key_first_by_fn(selector)(self.lower())

    def key_last_by[K](self, selector: Selector[T, K]) -> dict[K, T]:
        return fn.key_last_by_fn(selector)(self.lower())

    def map_key_by[K, V](self, mapper: Callable[[T, int], tuple[K, V]]) -> dict[K, list[V]]:
        return fn.map_key_by_fn(mapper)(self.lower())

    def map_key_first_by[K, V](self, mapper: Callable[[T, int], tuple[K, V]]) -> dict[K, V]:
        return fn.map_key_first_by_fn(mapper)(self.lower())

    def map_key_last_by[K, V](self, mapper: Callable[[T, int], tuple[K, V]]) -> dict[K, V]:
        return fn.map_key_last_by_fn(mapper)(self.lower())

    def to_list(self) -> list[T]:
        from .convert import to_list
        return to_list(self.lower())

    def to_set(self) -> set[T]:
        from .convert import to_set
        return to_set(self.lower())


def flow[T](items: Iterable[T]) -> Flow[T]:
    """Start a fluent chain over items."""
    ensure_iterable(items, operation="flow")
    return Flow(Base(items))


__all__ = ("Expr", "Base", "Step", "Flow", "flow")

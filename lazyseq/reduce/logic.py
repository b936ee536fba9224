"""Numeric and boolean reducers

sum/product are plain folds; the boolean reducers short-circuit."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .._helpers import ensure_iterable
from .._types import Predicate
from .fold import fold

def sum(items: Iterable[typing.Any]) -> typing.Any:
    """Sum of elements, 0 for an empty sequence."""
    ensure_iterable(items, operation="sum")
    return fold(items, lambda acc, element, _: acc + element, initial=0)

def product(items: Iterable[typing.Any]) -> typing.Any:
    """Product of elements, 1 for an empty sequence."""
    ensure_iterable(items, operation="product")
    return fold(items, lambda acc, element, _: acc * element, initial=1)

def and_(items: Iterable[object]) -> bool:
    """True unless some element is falsy. Stops at the first falsy one."""
    ensure_iterable(items, operation="and_")
    for element in items:
        if not element:
            return False
    return True

def or_(items: Iterable[object]) -> bool:
    """True if some element is truthy. Stops at the first truthy one."""
    ensure_iterable(items, operation="or_")
    for element in items:
        if element:
            return True
    return False

def any[T](items: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if predicate holds for some element. Empty -> False."""
    ensure_iterable(items, operation="any")
    for index, element in enumerate(items):
        if predicate(element, index):
            return True
    return False

def all[T](items: Iterable[T], predicate: Predicate[T]) -> bool:
    """True if predicate holds for every element. Empty -> True."""
    ensure_iterable(items, operation="all")
    for index, element in enumerate(items):
        if not predicate(element, index):
            return False
    return True

__all__ = ("sum", "product", "and_", "or_", "any", "all")

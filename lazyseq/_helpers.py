"""Internal helpers for lazyseq.

Common functions used across multiple modules.
These are not part of the public API but can be used for writing custom operations."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from ._errors import NotIterableError
from ._types import Predicate

# Text and binary values iterate over their characters, but are scalars here
_SCALAR_TYPES = (str, bytes, bytearray)

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def is_iterable(value: object) -> typing.TypeGuard[Iterable[typing.Any]]:
    """
    Test whether value can be used as a sequence.

    True for lists, tuples, sets, dicts, ranges, generators and anything
    else implementing ``__iter__``. False for ``None``, numbers, booleans,
    strings, bytes and plain objects.

    Example:
        is_iterable([1, 2, 3])    # True
        is_iterable(x for x in y) # True
        is_iterable("hello")      # False
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return False
    return isinstance(value, Iterable)

def ensure_iterable[T](value: Iterable[T], *, operation: str) -> Iterable[T]:
    """
    Fail fast when value is not a sequence.

    Called eagerly by every public operation, before any generator body runs,
    so the error points at the call site instead of the first pull.
    """
    if not is_iterable(value):
        raise NotIterableError(value, operation)
    return value

def check_bound(name: str, value: object, operation: str) -> None:
    """Reject non-int positions (bool included) at call time."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{operation}(): {name} must be an int, got {type(value).__name__}")

def negate[T](predicate: Predicate[T]) -> Predicate[T]:
    """Flip a predicate."""
    def negated(element: T, index: int) -> bool:
        return not predicate(element, index)
    return negated

def equals[T](value: T) -> Predicate[T]:
    """Predicate matching elements equal to value."""
    def matches(element: T, index: int) -> bool:
        _ = index
        return element == value
    return matches

__all__ = (
    # Identity
    "identity",
    # Sequence capability
    "is_iterable",
    "ensure_iterable",
    # Position arguments
    "check_bound",
    # Predicate builders
    "negate",
    "equals",
)

"""
Core type definitions for lazyseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Option

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests an element at its position
type Predicate[T] = Callable[[T, int], bool]

# Mapper = function that transforms an element at its position
type Mapper[T, R] = Callable[[T, int], R]

# Reducer = (accumulator, element, position) -> next accumulator
type Reducer[A, T] = Callable[[A, T, int], A]

# Selector = function that extracts a grouping key
type Selector[T, K] = Callable[[T, int], K]

# Comparator = ordering of two values: negative / zero / positive
type Comparator[T] = Callable[[T, T], int]

# Effect = observation of an element, result is ignored
type Effect[T] = Callable[[T, int], object]

# Stage = one step of a pipeline, takes the whole sequence
type Stage[T, R] = Callable[[Iterable[T]], R]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# Maybe = absent-or-present single value
# NOTE: Nothing() вместо None, чтобы None оставался обычным элементом.
type Maybe[T] = Option[T]

__all__ = (
    # Type aliases
    "Predicate",
    "Mapper",
    "Reducer",
    "Selector",
    "Comparator",
    "Effect",
    "Stage",
    # Concrete shortcuts
    "Maybe",
)

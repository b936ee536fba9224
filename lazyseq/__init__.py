"""
Lazy sequence utilities.

Pure functions over any iterable: each one consumes its input lazily and,
where it can, returns another lazy iterator instead of a container.

Architecture:
- Plain functions take the sequence first: map(items, mapper)
- Curried forms (*_fn) take everything else first, for pipe()
- Flow wraps an iterable for method chaining

Callbacks receive the element's position as their last argument:
predicate(element, index), reducer(acc, element, index).
Single-value results are kungfu Options: Some(value) or Nothing().
"""

# Core types
from ._types import Comparator, Effect, Mapper, Maybe, Predicate, Reducer, Selector, Stage

# Internal helpers (for custom operations)
from . import _helpers
from ._helpers import is_iterable

# AST builder (Flow API)
from .ast import Base, Expr, Flow, Step, flow

# Curried forms
from . import fluent
from .fluent import fn, pipe

# Positional access
from .access import empty, first, initial, last, nth, only, tail

# Sub-sequences
from .slicing import drop, drop_while, slice, take, take_while

# Elementwise transforms
from .transform import (
    exclude,
    exclude_first,
    exclude_none,
    filter,
    filter_first,
    map,
    remove,
    remove_first,
    tap,
)

# Reductions
from .reduce import (
    all,
    and_,
    any,
    contains,
    find,
    find_index,
    fold,
    fold1,
    index_of,
    maximum,
    minimum,
    natural_order,
    or_,
    product,
    scan,
    scan1,
    sum,
)

# Combinators
from .combine import append, concat, concat_map, pairwise, prepend, push, unshift, zip

# Splitting
from .split import SplitCursor, SplitSide, partition, partition_while, split

# Grouping
from .group import key_by, key_first_by, key_last_by, map_key_by, map_key_first_by, map_key_last_by

# Conversions
from .convert import to_list, to_set

# Errors
from ._errors import NotIterableError, ReentrantPullError

__all__ = (
    # Types
    "Comparator",
    "Effect",
    "Mapper",
    "Maybe",
    "Predicate",
    "Reducer",
    "Selector",
    "Stage",
    # Internal helpers (for custom operations)
    "_helpers",
    "is_iterable",
    # AST
    "Base",
    "Expr",
    "Flow",
    "Step",
    "flow",
    # Curried forms
    "fluent",
    "fn",
    "pipe",
    # Access
    "first",
    "last",
    "only",
    "nth",
    "empty",
    "initial",
    "tail",
    # Sub-sequences
    "slice",
    "take",
    "drop",
    "take_while",
    "drop_while",
    # Transform
    "map",
    "filter",
    "exclude",
    "exclude_none",
    "remove",
    "filter_first",
    "exclude_first",
    "remove_first",
    "tap",
    # Reduce
    "fold",
    "fold1",
    "scan",
    "scan1",
    "sum",
    "product",
    "and_",
    "or_",
    "any",
    "all",
    "contains",
    "find",
    "find_index",
    "index_of",
    "maximum",
    "minimum",
    "natural_order",
    # Combine
    "concat",
    "concat_map",
    "prepend",
    "append",
    "push",
    "unshift",
    "zip",
    "pairwise",
    # Split
    "SplitCursor",
    "SplitSide",
    "split",
    "partition",
    "partition_while",
    # Group
    "key_by",
    "key_first_by",
    "key_last_by",
    "map_key_by",
    "map_key_first_by",
    "map_key_last_by",
    # Convert
    "to_list",
    "to_set",
    # Errors
    "NotIterableError",
    "ReentrantPullError",
)

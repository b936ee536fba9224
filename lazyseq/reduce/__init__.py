from .fold import fold, fold1, scan, scan1
from .logic import all, and_, any, or_, product, sum
from .search import contains, find, find_index, index_of, maximum, minimum, natural_order

__all__ = (
    # Folds
    "fold",
    "fold1",
    "scan",
    "scan1",
    # Numeric / boolean
    "sum",
    "product",
    "and_",
    "or_",
    "any",
    "all",
    # Search
    "contains",
    "find",
    "find_index",
    "index_of",
    "maximum",
    "minimum",
    "natural_order",
)

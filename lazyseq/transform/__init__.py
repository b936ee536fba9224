from .effects import tap
from .filter import (
    exclude,
    exclude_first,
    exclude_none,
    filter,
    filter_first,
    remove,
    remove_first,
)
from .map import map

__all__ = (
    # Map
    "map",
    # Filter
    "filter",
    "exclude",
    "exclude_none",
    "remove",
    "filter_first",
    "exclude_first",
    "remove_first",
    # Effects
    "tap",
)

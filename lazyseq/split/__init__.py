from .cursor import SplitCursor, SplitSide
from .partition import partition, partition_while, split

__all__ = (
    # Shared state
    "SplitCursor",
    "SplitSide",
    # Combinators
    "split",
    "partition",
    "partition_while",
)

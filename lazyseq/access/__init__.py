from .position import empty, first, initial, last, nth, only, tail

__all__ = (
    # Single values
    "first",
    "last",
    "only",
    "nth",
    "empty",
    # Lazy views
    "initial",
    "tail",
)

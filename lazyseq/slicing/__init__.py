from .bounds import drop, slice, take
from .runs import drop_while, take_while

__all__ = (
    # Position bounded
    "slice",
    "take",
    "drop",
    # Predicate bounded
    "take_while",
    "drop_while",
)

from .concat import append, concat, concat_map, prepend, push, unshift
from .zip import pairwise, zip

__all__ = (
    # Concat
    "concat",
    "concat_map",
    "prepend",
    "append",
    "push",
    "unshift",
    # Zip
    "zip",
    "pairwise",
)

from . import fn
from .fn import pipe

__all__ = ("fn", "pipe")

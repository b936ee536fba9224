from __future__ import annotations

class NotIterableError(TypeError):
    """Argument does not satisfy the sequence capability."""

    value: object
    operation: str

    def __init__(self, value: object, operation: str) -> None:
        self.value = value
        self.operation = operation
        super().__init__(f"{operation}() expected an iterable, got {type(value).__name__}")

class ReentrantPullError(RuntimeError):
    """A split cursor was advanced while it was already advancing."""

    index: int

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Split cursor re-entered while pulling element {index}")

__all__ = ("NotIterableError", "ReentrantPullError")

"""
Exceptions raised by the sequence containers.

Each error also derives from the matching builtin, so callers catching
IndexError / ValueError / TypeError keep working.
"""


class ContainerError(Exception):
    """Base exception for container errors."""
    pass


class InvalidCapacityError(ContainerError, ValueError):
    """Raised when a requested initial capacity is negative or not an integer."""
    pass


class MissingSourceError(ContainerError, TypeError):
    """Raised when a copy constructor is given no source sequence."""
    pass


class IndexOutOfBoundsError(ContainerError, IndexError):
    """Raised when an index or range falls outside the valid bounds."""

    def __init__(self, message: str, index=None, size: int = 0) -> None:
        super().__init__(message)
        self.index = index
        self.size = size


def check_element_index(index: int, size: int) -> None:
    """Validate an index that must refer to a live element: 0 <= index < size."""
    if index < 0 or index >= size:
        raise IndexOutOfBoundsError(f"Index {index} out of range for size {size}", index, size)


def check_position_index(index: int, size: int) -> None:
    """Validate an insertion position: 0 <= index <= size."""
    if index < 0 or index > size:
        raise IndexOutOfBoundsError(f"Insert position {index} out of range for size {size}", index, size)


def check_range(from_index: int, to_index: int, size: int) -> None:
    """Validate a half-open range [from_index, to_index) against size."""
    if from_index < 0 or to_index > size or from_index > to_index or (to_index - from_index) > size:
        raise IndexOutOfBoundsError(
            f"Range [{from_index}, {to_index}) out of bounds for size {size}",
            (from_index, to_index),
            size,
        )

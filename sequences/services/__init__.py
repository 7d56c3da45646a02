from .array_list import DEFAULT_CAPACITY, ArrayList
from .exceptions import (
    ContainerError,
    IndexOutOfBoundsError,
    InvalidCapacityError,
    MissingSourceError,
)
from .linked_list import LinkedList

__all__ = [
    "ArrayList",
    "LinkedList",
    "DEFAULT_CAPACITY",
    "ContainerError",
    "IndexOutOfBoundsError",
    "InvalidCapacityError",
    "MissingSourceError",
]

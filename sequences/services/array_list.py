"""
Array-backed list with amortized growth.

Elements live in a pre-sized block of slots; the block is only ever indexed,
never appended to or sliced. When the block fills up it is replaced by one
roughly 1.5x larger.
"""
import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from .exceptions import (
    InvalidCapacityError,
    MissingSourceError,
    check_element_index,
    check_position_index,
    check_range,
)

logger = logging.getLogger(__name__)

E = TypeVar('E')

DEFAULT_CAPACITY = 10


class ArrayList(Generic[E]):
    """A dynamic array with positional access.

    Operations: add, insert, remove_at, remove, get, set, sub_list, size.
    Time: get/set O(1), add amortized O(1), insert/remove O(n).
    """
    __slots__ = ("_elements", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise InvalidCapacityError(f"Capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise InvalidCapacityError(f"Illegal capacity: {capacity}")
        self._elements: List[Optional[E]] = [None] * capacity
        self._size: int = 0

    @classmethod
    def from_iterable(cls, source: Iterable[E]) -> "ArrayList[E]":
        """Build a list holding every element of ``source`` in iteration order."""
        if source is None:
            raise MissingSourceError("Source sequence must not be None")
        result = cls()
        for element in source:
            result.add(element)
        logger.debug(f"Built ArrayList of {result._size} element(s) from {type(source).__name__}")
        return result

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def _grow(self) -> None:
        old = self._elements
        new_cap = int(len(old) * 1.5) + 1
        self._elements = [None] * new_cap
        # Copy every slot, including the unused tail
        for i in range(len(old)):
            self._elements[i] = old[i]
        logger.debug(f"Grew ArrayList backing block from {len(old)} to {new_cap} slots")

    def _fast_remove(self, index: int) -> None:
        # Shift (index, size) one slot left and clear the vacated tail slot
        for i in range(index, self._size - 1):
            self._elements[i] = self._elements[i + 1]
        self._size -= 1
        self._elements[self._size] = None

    def add(self, element: E) -> bool:
        if self._size == len(self._elements):
            self._grow()
        self._elements[self._size] = element
        self._size += 1
        return True

    def insert(self, index: int, element: E) -> None:
        """Insert ``element`` at ``index``, shifting later elements right.

        ``index == size()`` appends.
        """
        check_position_index(index, self._size)
        if self._size == len(self._elements):
            self._grow()
        # Walk downward so nothing is overwritten before it moves
        for i in range(self._size, index, -1):
            self._elements[i] = self._elements[i - 1]
        self._elements[index] = element
        self._size += 1

    def remove_at(self, index: int) -> E:
        check_element_index(index, self._size)
        old = self._elements[index]
        self._fast_remove(index)
        return old  # type: ignore[return-value]

    def remove(self, value: E) -> bool:
        """Remove the first element equal to ``value``. Returns False if none matches."""
        for index in range(self._size):
            if self._elements[index] == value:
                self._fast_remove(index)
                return True
        return False

    def get(self, index: int) -> E:
        check_element_index(index, self._size)
        return self._elements[index]  # type: ignore[return-value]

    def set(self, index: int, element: E) -> E:
        check_element_index(index, self._size)
        old = self._elements[index]
        self._elements[index] = element
        return old  # type: ignore[return-value]

    def sub_list(self, from_index: int, to_index: int) -> "ArrayList[E]":
        """Return a new list with the elements in [from_index, to_index).

        The result is a copy: mutating it leaves this list untouched.
        """
        check_range(from_index, to_index, self._size)
        result: ArrayList[E] = ArrayList(to_index - from_index)
        for i in range(from_index, to_index):
            result.add(self._elements[i])  # type: ignore[arg-type]
        return result

    def size(self) -> int:
        return self._size

    def to_list(self) -> List[E]:
        return [self._elements[i] for i in range(self._size)]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ArrayList({self.to_list()!r})"

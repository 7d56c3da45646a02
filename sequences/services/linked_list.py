"""
Doubly-linked list with head/tail tracking.

Positional lookups walk from whichever end is closer, so an index costs at
most size/2 hops. Removed nodes are cleared so they keep no references.
"""
import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from .exceptions import (
    MissingSourceError,
    check_element_index,
    check_position_index,
    check_range,
)

logger = logging.getLogger(__name__)

E = TypeVar('E')


class _Node(Generic[E]):
    __slots__ = ("data", "prev", "next")

    def __init__(self, prev: "Optional[_Node[E]]", data: Optional[E], next: "Optional[_Node[E]]") -> None:
        self.data = data
        self.prev = prev
        self.next = next


class LinkedList(Generic[E]):
    """A doubly-linked list with positional access.

    Operations: add, insert, remove_at, remove, get, set, sub_list, size.
    Time: add O(1); positional operations O(n) to locate, O(1) to splice.
    """
    __slots__ = ("_head", "_tail", "_size")

    def __init__(self) -> None:
        self._head: Optional[_Node[E]] = None
        self._tail: Optional[_Node[E]] = None
        self._size: int = 0

    @classmethod
    def from_iterable(cls, source: Iterable[E]) -> "LinkedList[E]":
        """Build a list holding every element of ``source`` in iteration order."""
        if source is None:
            raise MissingSourceError("Source sequence must not be None")
        result = cls()
        for element in source:
            result.add(element)
        logger.debug(f"Built LinkedList of {result._size} element(s) from {type(source).__name__}")
        return result

    # =============================
    # Node management
    # =============================

    def _link_last(self, element: E) -> None:
        prev_tail = self._tail
        node = _Node(prev_tail, element, None)
        self._tail = node
        if prev_tail is None:
            self._head = node
        else:
            prev_tail.next = node
        self._size += 1

    def _link_before(self, element: E, succ: _Node[E]) -> None:
        pred = succ.prev
        node = _Node(pred, element, succ)
        succ.prev = node
        if pred is None:
            self._head = node
        else:
            pred.next = node
        self._size += 1

    def _unlink(self, node: _Node[E]) -> E:
        element = node.data
        next_node = node.next
        prev_node = node.prev

        if prev_node is None:
            self._head = next_node
        else:
            prev_node.next = next_node
            node.prev = None

        if next_node is None:
            self._tail = prev_node
        else:
            next_node.prev = prev_node
            node.next = None

        node.data = None
        self._size -= 1
        return element  # type: ignore[return-value]

    def _node_at(self, index: int) -> _Node[E]:
        """Locate the node at ``index``, walking from the nearer end.

        Callers validate ``index`` first.
        """
        if index < (self._size >> 1):
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    # =============================
    # Public operations
    # =============================

    def add(self, element: E) -> bool:
        self._link_last(element)
        return True

    def insert(self, index: int, element: E) -> None:
        """Insert ``element`` at ``index``; ``index == size()`` appends."""
        check_position_index(index, self._size)
        if index == self._size:
            self._link_last(element)
        else:
            self._link_before(element, self._node_at(index))

    def remove(self, value: E) -> bool:
        """Remove the first element equal to ``value``. Returns False if none matches."""
        node = self._head
        while node is not None:
            if node.data == value:
                self._unlink(node)
                return True
            node = node.next
        return False

    def remove_at(self, index: int) -> E:
        check_element_index(index, self._size)
        return self._unlink(self._node_at(index))

    def get(self, index: int) -> E:
        check_element_index(index, self._size)
        return self._node_at(index).data  # type: ignore[return-value]

    def set(self, index: int, element: E) -> E:
        check_element_index(index, self._size)
        node = self._node_at(index)
        old = node.data
        node.data = element
        return old  # type: ignore[return-value]

    def sub_list(self, from_index: int, to_index: int) -> "LinkedList[E]":
        """Return a new list with the elements in [from_index, to_index)."""
        check_range(from_index, to_index, self._size)
        result: LinkedList[E] = LinkedList()
        if from_index == to_index:
            return result
        node = self._node_at(from_index)
        for _ in range(to_index - from_index):
            result.add(node.data)  # type: ignore[arg-type]
            node = node.next  # type: ignore[assignment]
        return result

    def size(self) -> int:
        return self._size

    def to_list(self) -> List[E]:
        items: List[E] = []
        node = self._head
        while node is not None:
            items.append(node.data)  # type: ignore[arg-type]
            node = node.next
        return items

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"

"""Doubly linked list with insertion and deletion at any position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice


@dataclass(eq=False, slots=True)
class DoublyNode:
    """A node linked to both its neighbours."""

    data: int
    prev: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def node_at(self, index: int) -> DoublyNode:
        """Return the node at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        return next(islice(self._nodes(), index, None))

    def _link_after(self, previous: DoublyNode | None, data: int) -> DoublyNode:
        """Link a new node after ``previous``, or at the head when it is None."""
        following = self.head if previous is None else previous.next
        node = DoublyNode(data, previous, following)
        if previous is None:
            self.head = node
        else:
            previous.next = node
        if following is None:
            self.tail = node
        else:
            following.prev = node
        self._size += 1
        return node

    def _unlink(self, node: DoublyNode) -> int:
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def insert_at_first(self, data: int) -> DoublyNode:
        """Insert ``data`` as the new head."""
        return self._link_after(None, data)

    def insert_at_index(self, index: int, data: int) -> DoublyNode:
        """Insert ``data`` so that it ends up at position ``index``."""
        if index == 0:
            return self.insert_at_first(data)
        if not 0 < index <= self._size:
            raise IndexError(f"insertion index {index} out of range")
        return self._link_after(self.node_at(index - 1), data)

    def insert_at_end(self, data: int) -> DoublyNode:
        """Append ``data`` after the last node."""
        return self._link_after(self.tail, data)

    def insert_after(self, node: DoublyNode, data: int) -> DoublyNode:
        """Insert ``data`` directly after ``node``, which must be in this list."""
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")
        return self._link_after(node, data)

    def delete_at_begin(self) -> int:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("List is already empty")
        return self._unlink(self.head)

    def delete_at_position(self, index: int) -> int:
        """Remove the node at ``index`` and return its value."""
        if self.head is None:
            raise IndexError("List is empty")
        if not 0 <= index < self._size:
            raise IndexError("Index out of bounds")
        return self._unlink(self.node_at(index))

    def delete_at_end(self) -> int:
        """Remove the last node and return its value."""
        if self.tail is None:
            raise IndexError("List is already empty")
        return self._unlink(self.tail)

    def delete_by_value(self, element: int) -> int:
        """Remove the first node holding ``element`` and return its value."""
        if self.head is None:
            raise ValueError("List is empty")
        for node in self._nodes():
            if node.data == element:
                return self._unlink(node)
        raise ValueError("Element not found in the list")
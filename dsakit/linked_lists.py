"""Singly linked and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice


@dataclass(eq=False, slots=True)
class Node:
    """A node holding one value and a link to the next node."""

    data: int
    next: Node | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list with positional and value-based edits."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def node_at(self, index: int) -> Node:
        """Return the node at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        return next(islice(self._nodes(), index, None))

    def insert_at_beginning(self, data: int) -> Node:
        """Insert ``data`` as the new head and return its node."""
        node = Node(data, self.head)
        self.head = node
        self._size += 1
        return node

    def insert_at_index(self, index: int, data: int) -> Node:
        """Insert ``data`` so that it ends up at position ``index``."""
        if index == 0:
            return self.insert_at_beginning(data)
        if not 0 < index <= self._size:
            raise IndexError(f"insertion index {index} out of range")
        previous = self.node_at(index - 1)
        node = Node(data, previous.next)
        previous.next = node
        self._size += 1
        return node

    def insert_at_end(self, data: int) -> Node:
        """Append ``data`` after the last node."""
        return self.insert_at_index(self._size, data)

    def insert_after(self, node: Node, data: int) -> Node:
        """Insert ``data`` directly after ``node``, which must be in this list."""
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")
        new_node = Node(data, node.next)
        node.next = new_node
        self._size += 1
        return new_node

    def delete_at_beginning(self) -> int:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.data

    def delete_at_index(self, index: int) -> int:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"deletion index {index} out of range")
        if index == 0:
            return self.delete_at_beginning()
        previous = self.node_at(index - 1)
        target = previous.next
        assert target is not None
        previous.next = target.next
        self._size -= 1
        return target.data

    def delete_at_end(self) -> int:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        return self.delete_at_index(self._size - 1)

    def delete_value(self, element: int) -> bool:
        """Remove the first node holding ``element``; report whether one was found."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == element:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous = node
        return False


class CircularLinkedList:
    """A singly linked list whose last node links back to the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            node = Node(value)
            if self._tail is None:
                self.head = node
            else:
                self._tail.next = node
            self._tail = node
            node.next = self.head
            self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self.head
        if node is None:
            return
        while True:
            yield node.data
            node = node.next
            if node is self.head or node is None:
                break

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def insert_at_first(self, data: int) -> Node:
        """Insert ``data`` as the new head, keeping the ring closed."""
        node = Node(data)
        if self.head is None or self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self.head
            self._tail.next = node
        self.head = node
        self._size += 1
        return node
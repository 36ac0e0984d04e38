"""Bounded and linked stacks and queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class ArrayStack:
    """A stack backed by an array of fixed size."""

    def __init__(self, size: int = 10) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[int] = []

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: int) -> None:
        """Push ``value``; raise StackOverflowError when the stack is full."""
        if self.is_full():
            raise StackOverflowError(f"Stack Overflow: {value} can't be entered")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("Stack Underflow, can't delete any element")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(size={self.size}, items={self._items!r})"


@dataclass(eq=False, slots=True)
class _StackNode:
    data: int
    next: _StackNode | None = field(default=None, repr=False)


class LinkedStack:
    """An unbounded stack made of linked nodes."""

    def __init__(self) -> None:
        self._top: _StackNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: int) -> None:
        self._top = _StackNode(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("Stack Underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def _nodes(self) -> Iterator[_StackNode]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def peek(self, position: int) -> int:
        """Return the value at ``position``, counting the top as 1."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node.data
        raise IndexError(f"position {position} out of range")

    def top(self) -> int:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data

    def bottom(self) -> int:
        """Return the bottom value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self.peek(self._size)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class ArrayQueue:
    """A linear queue over a fixed array.

    Slots freed by dequeueing are not reused until the queue becomes empty,
    at which point the front and rear reset to the start of the array.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full, cannot enqueue")
        self._slots.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty, cannot dequeue")
        value = self._slots[self._front]
        self._front += 1
        if self.is_empty():
            self._slots.clear()
            self._front = 0
        return value

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front :])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue(capacity={self.capacity}, items={list(self)!r})"


class LinkedQueue:
    """An unbounded first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, value: int) -> None:
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmptyError("Queue is empty. Dequeue operation failed.")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to rear."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"
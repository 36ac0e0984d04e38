"""Fixed-capacity arrays, positional insertion and deletion, sorting and searching."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class BoundedArray:
    """An array with a reserved total size of which only a prefix is in use."""

    def __init__(self, total_size: int, used_size: int) -> None:
        if total_size < 0 or used_size < 0:
            raise ValueError("sizes must not be negative")
        if used_size > total_size:
            raise ValueError(
                f"used size {used_size} exceeds total size {total_size}"
            )
        self.total_size = total_size
        self.used_size = used_size
        self._items = [0] * total_size

    def fill(self, values: Iterable[int]) -> None:
        """Set the elements in use, one value per used slot."""
        values = list(values)
        if len(values) != self.used_size:
            raise ValueError(
                f"expected {self.used_size} values, got {len(values)}"
            )
        self._items[: self.used_size] = values

    def __iter__(self) -> Iterator[int]:
        return iter(self._items[: self.used_size])

    def __len__(self) -> int:
        return self.used_size

    def __repr__(self) -> str:
        return (
            f"BoundedArray(total_size={self.total_size}, "
            f"items={list(self)!r})"
        )


def insert_at(
    items: Sequence[int], element: int, index: int, capacity: int
) -> list[int]:
    """Return a copy of ``items`` with ``element`` placed at ``index``.

    Raises OverflowError when the sequence already fills ``capacity``.
    """
    if len(items) >= capacity:
        raise OverflowError(f"array is at capacity ({capacity})")
    if not 0 <= index <= len(items):
        raise IndexError(f"insertion index {index} out of range")
    result = list(items)
    result.insert(index, element)
    return result


def delete_at(items: Sequence[int], index: int) -> list[int]:
    """Return a copy of ``items`` without the element at ``index``."""
    if not 0 <= index < len(items):
        raise IndexError(f"deletion index {index} out of range")
    result = list(items)
    del result[index]
    return result


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by bubble sort."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def linear_search(values: Sequence[int], element: int) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    return next(
        (position for position, value in enumerate(values) if value == element),
        -1,
    )


def binary_search(values: Sequence[int], element: int) -> int:
    """Return an index of ``element`` in the ascending ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == element:
            return mid
        if values[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    return -1
"""Sequence helpers: index-tracking sorting and heap-ordered containers."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Protocol, TypeVar

__all__ = ["IndexedSlice", "OrderedHeap", "ReverseHeap"]

T = TypeVar("T")


class _Heap(Protocol):
    def less(self, i: int, j: int) -> bool: ...


class IndexedSlice(Generic[T]):
    """A list of ordered values sorted together with their original indices.

    ``indices[k]`` is the position that ``slice[k]`` had before any sorting
    or swapping took place.
    """

    def __init__(self, values: Iterable[T]) -> None:
        self.slice: List[T] = list(values)
        self.indices: List[int] = list(range(len(self.slice)))

    def __len__(self) -> int:
        return len(self.indices)

    def less(self, i: int, j: int) -> bool:
        """Tell whether the value at ``i`` is smaller than the value at ``j``."""
        return self.slice[i] < self.slice[j]

    def swap(self, i: int, j: int) -> None:
        """Swap the elements at ``i`` and ``j`` in both values and indices."""
        self.indices[i], self.indices[j] = self.indices[j], self.indices[i]
        self.slice[i], self.slice[j] = self.slice[j], self.slice[i]

    def sort(self, reverse: bool = False) -> None:
        """Sort stably by value, keeping indices aligned with their values.

        With ``reverse`` the order is descending; equal values keep their
        relative order either way.
        """
        pairs = sorted(
            zip(self.slice, self.indices), key=lambda pair: pair[0], reverse=reverse
        )
        self.slice[:] = [value for value, _ in pairs]
        self.indices[:] = [index for _, index in pairs]

    def __repr__(self) -> str:
        return f"IndexedSlice(slice={self.slice!r}, indices={self.indices!r})"


class OrderedHeap(Generic[T]):
    """Backing storage of a min-heap of ordered values.

    ``push`` appends and ``pop`` removes the last element; keeping the heap
    order is the job of the algorithm that drives these operations.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._data: List[T] = list(values)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedHeap):
            return self._data == other._data
        if isinstance(other, list):
            return self._data == other
        return NotImplemented

    def less(self, i: int, j: int) -> bool:
        """Tell whether the value at ``i`` is smaller than the value at ``j``."""
        return self._data[i] < self._data[j]

    def swap(self, i: int, j: int) -> None:
        """Swap the elements at ``i`` and ``j``."""
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def push(self, x: T) -> None:
        """Append ``x``."""
        self._data.append(x)

    def pop(self) -> T:
        """Remove and return the last element; raise ``IndexError`` if empty."""
        if not self._data:
            raise IndexError("pop from empty heap")
        return self._data.pop()

    def __repr__(self) -> str:
        return f"OrderedHeap({self._data!r})"


class ReverseHeap:
    """A view of another heap whose ordering is reversed."""

    def __init__(self, data: Any) -> None:
        self.data = data

    def less(self, i: int, j: int) -> bool:
        """Return the wrapped heap's ``less`` with the arguments exchanged."""
        return self.data.less(j, i)

    def __len__(self) -> int:
        return len(self.data)

    def swap(self, i: int, j: int) -> None:
        """Swap the elements at ``i`` and ``j`` of the wrapped heap."""
        self.data.swap(i, j)

    def push(self, x: Any) -> None:
        """Append ``x`` to the wrapped heap."""
        self.data.push(x)

    def pop(self) -> Any:
        """Remove and return the last element of the wrapped heap."""
        return self.data.pop()
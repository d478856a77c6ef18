"""A fixed-capacity ring deque, a circular linked list and a bounded buffer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BoundedBuffer", "CircularList", "RingDeque"]


class RingDeque:
    """Double-ended queue stored in a fixed number of slots used as a ring."""

    def __init__(self, capacity: int = 7) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1: {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def push_front(self, item: Any) -> None:
        """Add ``item`` before the current front; raise ``OverflowError`` if full."""
        if self.is_full():
            raise OverflowError("Queue Overflow")
        self._front = (self._front - 1) % len(self._slots)
        self._slots[self._front] = item
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Add ``item`` after the current rear; raise ``OverflowError`` if full."""
        if self.is_full():
            raise OverflowError("Queue Overflow")
        self._slots[(self._front + self._size) % len(self._slots)] = item
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the front item; raise ``IndexError`` if empty."""
        if self.is_empty():
            raise IndexError("Queue Underflow")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._size -= 1
        return item

    def pop_back(self) -> Any:
        """Remove and return the rear item; raise ``IndexError`` if empty."""
        if self.is_empty():
            raise IndexError("Queue Underflow")
        index = (self._front + self._size - 1) % len(self._slots)
        item = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return item

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % len(self._slots)]

    def __repr__(self) -> str:
        return f"RingDeque({list(self)!r}, capacity={self.capacity})"


@dataclass(eq=False)
class _Link:
    value: Any
    next: Optional[_Link] = None


class CircularList:
    """Singly linked circular list addressed through its last node."""

    def __init__(self) -> None:
        self._last: Optional[_Link] = None
        self._size = 0

    def insert_front(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the first element."""
        link = _Link(value)
        if self._last is None:
            link.next = link
            self._last = link
        else:
            link.next = self._last.next
            self._last.next = link
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        head = self._last.next
        current = head
        while True:
            assert current is not None
            yield current.value
            current = current.next
            if current is head:
                break

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"


class BoundedBuffer:
    """Producer/consumer counter over a buffer with a fixed number of slots."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1: {capacity}")
        self._capacity = capacity
        self._full = 0
        self._item = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def produce(self) -> int:
        """Produce the next item and return its number; raise if full."""
        if self._full == self._capacity:
            raise OverflowError("Buffer is full")
        self._full += 1
        self._item += 1
        return self._item

    def consume(self) -> int:
        """Consume the most recent item and return its number; raise if empty."""
        if self._full == 0:
            raise IndexError("Buffer is empty")
        self._full -= 1
        item = self._item
        self._item -= 1
        return item

    def __len__(self) -> int:
        return self._full
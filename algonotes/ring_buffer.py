"""A fixed-capacity FIFO queue stored in a circular array."""

from __future__ import annotations

from typing import Any, Iterator


class RingBuffer:
    """A queue of at most ``capacity`` items; one slot is kept free to tell full from empty."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * (capacity + 1)
        self._front = self._rear = (capacity + 1) // 2

    @property
    def capacity(self) -> int:
        """Largest number of items the buffer holds."""
        return len(self._slots) - 1

    def _advance(self, index: int) -> int:
        index += 1
        return index if index < len(self._slots) else 0

    def is_full(self) -> bool:
        """Report whether no further item fits."""
        return self._advance(self._rear) == self._front

    def push(self, item: Any) -> None:
        """Add *item* at the rear; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("ring buffer is full")
        self._slots[self._rear] = item
        self._rear = self._advance(self._rear)

    def pop(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if self._front == self._rear:
            raise IndexError("pop from an empty ring buffer")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._advance(self._front)
        return item

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._slots)

    def __iter__(self) -> Iterator[Any]:
        index = self._front
        while index != self._rear:
            yield self._slots[index]
            index = self._advance(index)
"""A bounded FIFO of messages with a resizable capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .message import Message


class Ring:
    """Bounded first-in, first-out store of messages.

    ``added`` and ``deleted`` count messages pushed and popped over the
    ring's lifetime; messages dropped by shrinking are not counted.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("ring size cannot be negative")
        self.size = size
        self.added = 0
        self.deleted = 0
        self._items: deque[Message] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._items)

    def is_full(self) -> bool:
        """True when no more messages fit."""
        return len(self._items) >= self.size

    def push(self, message: Message) -> None:
        """Append a message at the tail; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("ring is full")
        self._items.append(message)
        self.added += 1

    def pop(self) -> Message:
        """Remove and return the oldest message; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty ring")
        message = self._items.popleft()
        self.deleted += 1
        return message

    def grow(self) -> None:
        """Raise the capacity by one."""
        self.size += 1

    def shrink(self) -> Message | None:
        """Lower the capacity by one, dropping the oldest message if it no longer fits.

        Returns the dropped message, or None. Raises ValueError when the
        capacity is already zero.
        """
        if self.size <= 0:
            raise ValueError("ring size is already zero")
        self.size -= 1
        if len(self._items) > self.size:
            return self._items.popleft()
        return None

    def clear(self) -> None:
        """Drop every message and reset the counters and the capacity to zero."""
        self._items.clear()
        self.added = 0
        self.deleted = 0
        self.size = 0
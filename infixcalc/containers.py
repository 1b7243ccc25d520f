"""Growable LIFO stack and FIFO queue of string tokens."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Stack:
    """A last-in, first-out collection of tokens."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, item: str) -> None:
        """Place ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> str:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> str:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __str__(self) -> str:
        return "stack: " + "".join(self._items)


class Queue:
    """A first-in, first-out collection of tokens."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def enqueue(self, item: str) -> None:
        """Append ``item`` at the tail of the queue."""
        self._items.append(item)

    def dequeue(self) -> str:
        """Remove and return the head item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from head to tail."""
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(self._items)
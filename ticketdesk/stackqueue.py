"""Stack and queue built on the cursor list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ticketdesk.linkedlist import LinkedList


class Stack:
    """Last-in, first-out collection."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return iter(self._items)

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._items.push_front(data)

    def top(self) -> Any:
        """Return the top element, or ``None`` if empty."""
        return self._items.first()

    def pop(self) -> Any:
        """Remove and return the top element, or ``None`` if empty."""
        return self._items.pop_front()

    def clean(self) -> None:
        """Remove every element."""
        self._items.clean()


class Queue:
    """First-in, first-out collection."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(self._items)

    def insert(self, data: Any) -> None:
        """Add ``data`` at the back."""
        self._items.push_back(data)

    def remove(self) -> Any:
        """Remove and return the front element, or ``None`` if empty."""
        return self._items.pop_front()

    def front(self) -> Any:
        """Return the front element, or ``None`` if empty."""
        return self._items.first()

    def clean(self) -> None:
        """Remove every element."""
        self._items.clean()
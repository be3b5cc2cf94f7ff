"""A singly ordered list with a movable cursor for step-by-step traversal."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

LowerThan = Callable[[Any, Any], bool]


class LinkedList:
    """Ordered collection with a cursor used by ``first``/``next``.

    The cursor marks the "current" element. ``push_current`` inserts after
    it and ``pop_current`` removes it. Reading past either end gives ``None``.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._cursor: int | None = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements without moving the cursor."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def first(self) -> Any:
        """Move the cursor to the first element and return it, or ``None``."""
        if not self._items:
            return None
        self._cursor = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return the new current element, or ``None``.

        At the last element the cursor stays where it is.
        """
        if self._cursor is None or self._cursor + 1 >= len(self._items):
            return None
        self._cursor += 1
        return self._items[self._cursor]

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the start."""
        self._items.insert(0, data)
        if self._cursor is not None:
            self._cursor += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end."""
        self._items.append(data)

    def push_current(self, data: Any) -> None:
        """Insert ``data`` right after the current element.

        Does nothing when no element is current.
        """
        if self._cursor is None:
            return
        self._items.insert(self._cursor + 1, data)

    def sorted_insert(self, data: Any, lower_than: LowerThan) -> None:
        """Insert ``data`` before the first element it is lower than.

        Elements equal to ``data`` stay in front of it. When the insertion is
        not at the start, the cursor is left on the element before ``data``.
        """
        if not self._items or lower_than(data, self._items[0]):
            self.push_front(data)
            return
        position = next(
            (
                index
                for index, item in enumerate(self._items)
                if index > 0 and lower_than(data, item)
            ),
            len(self._items),
        )
        self._cursor = position - 1
        self.push_current(data)

    def pop_front(self) -> Any:
        """Remove and return the first element, or ``None`` if empty."""
        if not self._items:
            return None
        data = self._items.pop(0)
        if self._cursor is not None:
            self._cursor = self._cursor - 1 if self._cursor > 0 else None
        return data

    def pop_back(self) -> Any:
        """Remove and return the last element, or ``None`` if empty."""
        if not self._items:
            return None
        if self._cursor == len(self._items) - 1:
            self._cursor = None
        return self._items.pop()

    def pop_current(self) -> Any:
        """Remove and return the current element, or ``None`` if none is set.

        The cursor moves to the element that followed the removed one, or is
        cleared when the removed element was the last.
        """
        if self._cursor is None:
            return None
        data = self._items.pop(self._cursor)
        if self._cursor >= len(self._items):
            self._cursor = None
        return data

    def clean(self) -> None:
        """Remove every element and clear the cursor."""
        self._items.clear()
        self._cursor = None
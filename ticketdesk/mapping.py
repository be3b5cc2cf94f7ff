"""Maps, multimaps and sets over a list, using custom key comparisons."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from ticketdesk.linkedlist import LinkedList

Comparison = Callable[[Any, Any], bool]


@dataclass
class MapPair:
    """A key and the value stored with it."""

    key: Any
    value: Any


class Map:
    """Association of keys to values with at most one pair per key.

    Given ``lower_than`` the pairs are kept sorted by key and keys are equal
    when neither is lower than the other. Otherwise pairs keep insertion
    order and keys are compared with ``is_equal`` (default ``==``).
    """

    def __init__(
        self,
        is_equal: Comparison | None = None,
        *,
        lower_than: Comparison | None = None,
    ) -> None:
        if is_equal is None and lower_than is None:
            is_equal = operator.eq
        self._is_equal = is_equal
        self._lower_than = lower_than
        self._pairs = LinkedList()

    @property
    def is_sorted(self) -> bool:
        return self._lower_than is not None

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[MapPair]:
        return iter(self._pairs)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def _keys_match(self, pair: MapPair, key: Any) -> bool:
        if self._is_equal is not None and self._is_equal(pair.key, key):
            return True
        lt = self._lower_than
        return lt is not None and not lt(pair.key, key) and not lt(key, pair.key)

    def _add(self, key: Any, value: Any) -> None:
        pair = MapPair(key, value)
        lt = self._lower_than
        if lt is not None:
            self._pairs.sorted_insert(pair, lambda a, b: lt(a.key, b.key))
        else:
            self._pairs.push_back(pair)

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair unless the key is already present."""
        if self.search(key) is not None:
            return
        self._add(key, value)

    def remove(self, key: Any) -> MapPair | None:
        """Remove and return the first pair with ``key``, or ``None``."""
        pair = self._pairs.first()
        while pair is not None:
            if self._keys_match(pair, key):
                self._pairs.pop_current()
                return pair
            pair = self._pairs.next()
        return None

    def search(self, key: Any) -> MapPair | None:
        """Return the first pair with ``key``, or ``None``."""
        return next((pair for pair in self._pairs if self._keys_match(pair, key)), None)

    def first(self) -> MapPair | None:
        """Start a traversal and return the first pair, or ``None``."""
        return self._pairs.first()

    def next(self) -> MapPair | None:
        """Return the next pair of the traversal, or ``None`` at the end."""
        return self._pairs.next()

    def clean(self) -> None:
        """Remove every pair."""
        self._pairs.clean()


class MultiMap(Map):
    """A map that keeps every inserted pair, including repeated keys."""

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair even if the key is already present."""
        self._add(key, value)


class Set:
    """Collection of distinct values, compared like the keys of a ``Map``."""

    def __init__(
        self,
        is_equal: Comparison | None = None,
        *,
        lower_than: Comparison | None = None,
    ) -> None:
        self._map = Map(is_equal, lower_than=lower_than)

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[Any]:
        return (pair.key for pair in self._map)

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal value is present."""
        self._map.insert(value, value)

    def remove(self, value: Any) -> Any:
        """Remove and return the stored value equal to ``value``, or ``None``."""
        pair = self._map.remove(value)
        return None if pair is None else pair.value

    def search(self, value: Any) -> Any:
        """Return the stored value equal to ``value``, or ``None``."""
        pair = self._map.search(value)
        return None if pair is None else pair.value

    def clean(self) -> None:
        """Remove every value."""
        self._map.clean()
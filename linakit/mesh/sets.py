"""Mutable sets of ints and of floats."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator, MutableSet
from typing import Any


class _TypedSet(MutableSet):
    """A mutable set whose elements are coerced to one numeric type."""

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: set = set()
        for value in values:
            self.add(value)

    @staticmethod
    def _coerce(value: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def _from_iterable(cls, iterable: Iterable[Any]):
        return cls(iterable)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._items)!r})"

    def add(self, value: Any) -> None:
        """Add ``value`` to the set."""
        self._items.add(self._coerce(value))

    def discard(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._items.discard(value)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def union(self, other: Iterable[Any]):
        """Return a new set with the elements of both sets."""
        return self._from_iterable((*self._items, *other))

    def intersection(self, other: Iterable[Any]):
        """Return a new set with the elements common to both sets."""
        other_set = set(other)
        return self._from_iterable(x for x in self._items if x in other_set)

    def symmetric_difference(self, other: Iterable[Any]):
        """Return a new set with the elements in exactly one of the two sets."""
        return self._from_iterable(self._items.symmetric_difference(set(other)))


class IntSet(_TypedSet):
    """A mutable set of ints."""

    __slots__ = ()

    @staticmethod
    def _coerce(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"IntSet holds ints, not {type(value).__name__}")
        return int(value)

    def add(self, value: int) -> None:
        """Add the int ``value`` to the set."""
        super().add(value)

    def symmetric_difference(self, other: Iterable[int]) -> IntSet:
        """Return a new IntSet with the values in exactly one of the two sets."""
        return super().symmetric_difference(other)


class FloatSet(_TypedSet):
    """A mutable set of floats."""

    __slots__ = ()

    @staticmethod
    def _coerce(value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"FloatSet holds floats, not {type(value).__name__}")
        return float(value)

    def add(self, value: float) -> None:
        """Add the float ``value`` to the set."""
        super().add(value)

    def symmetric_difference(self, other: Iterable[float]) -> FloatSet:
        """Return a new FloatSet with the values in exactly one of the two sets."""
        return super().symmetric_difference(other)


def sets_equal(a: _TypedSet, b: _TypedSet) -> bool:
    """Return True if both sets have the same size and the same elements."""
    return len(a) == len(b) and len(a.symmetric_difference(b)) == 0
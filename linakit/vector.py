"""One-dimensional float vectors and operations on them."""

from __future__ import annotations

import math
import numbers
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

import numpy as np


def _as_float(n: object) -> float:
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise TypeError(f"invalid numeric type of input: {type(n).__name__}")
    return float(n)


@dataclass(frozen=True)
class SortPair:
    """An element's original index together with its value."""

    key: int
    value: float


class Vector(Sequence):
    """An immutable sequence of floats with vector arithmetic."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._values: tuple[float, ...] = tuple(float(x) for x in values)

    # sequence protocol

    def __len__(self) -> int:
        return len(self._values)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> Vector: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._values[index])
        return self._values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Vector({list(self._values)!r})"

    def __str__(self) -> str:
        entries = [f"{x:f}" for x in self._values]
        width = max((len(e) for e in entries), default=0)
        return "{" + ", ".join(e.rjust(width) for e in entries) + "}\n"

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._values, dtype=float if dtype is None else dtype)

    # element access

    def at(self, n: int) -> float:
        """Return the element at ``n``; negative indexes count from the end."""
        length = len(self._values)
        if abs(n) > length:
            raise IndexError("index out of range")
        if n < 0:
            n += length
        if n >= length:
            raise IndexError("index out of range")
        return self._values[n]

    # arithmetic

    def _check_same_length(self, other: Sequence[float], operation: str) -> None:
        if len(self) != len(other):
            raise ValueError(f"{operation} requires equal-length vectors")

    def add(self, other: Sequence[float]) -> Vector:
        """Return the element-wise sum with ``other``."""
        self._check_same_length(other, "add")
        return Vector(a + b for a, b in zip(self._values, other))

    def add_num(self, n: float) -> Vector:
        """Return a vector with ``n`` added to every element."""
        value = _as_float(n)
        return Vector(a + value for a in self._values)

    def sub(self, other: Sequence[float]) -> Vector:
        """Return the element-wise difference with ``other``."""
        self._check_same_length(other, "sub")
        return Vector(a - b for a, b in zip(self._values, other))

    def sub_num(self, n: float) -> Vector:
        """Return a vector with ``n`` subtracted from every element."""
        value = _as_float(n)
        return Vector(a - value for a in self._values)

    def mul_num(self, n: float) -> Vector:
        """Return a vector with every element multiplied by ``n``."""
        value = _as_float(n)
        return Vector(a * value for a in self._values)

    def dot(self, other: Sequence[float]) -> float:
        """Return the dot product with ``other``."""
        self._check_same_length(other, "dot product")
        return sum(a * b for a, b in zip(self._values, other))

    def outer_product(self, other: Sequence[float]) -> np.ndarray:
        """Return the outer product as a ``len(self) x len(other)`` matrix."""
        return np.array([[a * b for b in other] for a in self._values], dtype=float).reshape(
            len(self), len(other)
        )

    def cross(self, other: Sequence[float]) -> Vector:
        """Return the cross product of two 3D vectors."""
        if len(self) != len(other) or len(self) != 3:
            raise ValueError("cross product requires 3d vectors in 3d space")
        a0, a1, a2 = self._values
        b0, b1, b2 = other
        return Vector((a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0))

    # norms and aggregates

    def square_sum(self) -> float:
        """Return the sum of squared elements."""
        return self.dot(self)

    def norm(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.square_sum())

    def normalize(self) -> Vector:
        """Return the unit vector in the same direction."""
        n = self.norm()
        if n == 0:
            raise ValueError("invalid input vector with norm equal to 0")
        return Vector(a / n for a in self._values)

    def to_matrix(self, rows: int, cols: int) -> np.ndarray:
        """Reshape the vector row-wise into a ``rows x cols`` matrix."""
        if len(self) != rows * cols:
            raise ValueError(
                f"invalid target matrix dimensions ({rows} x {cols}) "
                f"with vector length {len(self)}"
            )
        return np.array(self._values, dtype=float).reshape(rows, cols)

    def sum(self) -> float:
        """Return the sum of the elements."""
        return sum(self._values)

    def abs_sum(self) -> float:
        """Return the sum of the absolute values of the elements."""
        return sum(abs(a) for a in self._values)

    def mean(self) -> float:
        """Return the arithmetic mean."""
        return self.sum() / len(self)

    def variance(self) -> float:
        """Return the population variance."""
        return self.sub_num(self.mean()).square_sum() / len(self)

    def standard_deviation(self) -> float:
        """Return the population standard deviation."""
        return math.sqrt(self.variance())

    def tile(self, dim: int, n: int) -> np.ndarray:
        """Repeat the vector ``n`` times: as rows for ``dim`` 0, as columns for ``dim`` 1."""
        if dim not in (0, 1):
            raise ValueError("invalid tile dimension")
        tiled = np.array([self._values] * n, dtype=float).reshape(n, len(self))
        return tiled if dim == 0 else tiled.T.copy()

    # ordering

    def sorted_pairs(self) -> list[SortPair]:
        """Return ``(index, value)`` pairs sorted by ascending value."""
        pairs = [SortPair(i, v) for i, v in enumerate(self._values)]
        return sorted(pairs, key=lambda p: p.value)

    def max(self) -> tuple[int, float]:
        """Return the index and value of the largest element."""
        pairs = self.sorted_pairs()
        if not pairs:
            raise ValueError("max of empty vector")
        return pairs[-1].key, pairs[-1].value

    def min(self) -> tuple[int, float]:
        """Return the index and value of the smallest element."""
        pairs = self.sorted_pairs()
        if not pairs:
            raise ValueError("min of empty vector")
        return pairs[0].key, pairs[0].value

    def sorted_ascending(self) -> Vector:
        """Return a new vector sorted in ascending order."""
        return Vector(sorted(self._values))

    def sorted_descending(self) -> Vector:
        """Return a new vector sorted in descending order."""
        return Vector(sorted(self._values, reverse=True))

    def reversed(self) -> Vector:
        """Return a new vector with the elements in reverse order."""
        return Vector(self._values[::-1])

    def unique(self) -> Vector:
        """Return the distinct elements in order of first appearance."""
        return Vector(dict.fromkeys(self._values))

    def unique_with_count(self) -> dict[float, int]:
        """Return a mapping from each distinct element to its number of occurrences."""
        return dict(Counter(self._values))

    # construction and mapping

    def concatenate(self, other: Iterable[float]) -> Vector:
        """Return this vector followed by ``other``."""
        return Vector((*self._values, *other))

    def map_float(self, f: Callable[[float], float]) -> Vector:
        """Apply ``f`` to every element and return the results as a vector."""
        return Vector(f(a) for a in self._values)

    def map_int(self, f: Callable[[float], int]) -> list[int]:
        """Apply ``f`` to every element and return the integer results."""
        return [int(f(a)) for a in self._values]

    def angle(self, other: Sequence[float]) -> float:
        """Return the angle in radians between this vector and ``other``."""
        other_vec = other if isinstance(other, Vector) else Vector(other)
        n1, n2 = self.norm(), other_vec.norm()
        if n1 == 0 or n2 == 0:
            raise ZeroDivisionError("vector norm can not be zero")
        cosine = self.dot(other_vec) / (n1 * n2)
        return math.acos(max(-1.0, min(1.0, cosine)))


def cross_cov(u: Vector, v: Vector) -> np.ndarray:
    """Return the element-wise cross-covariance matrix of ``u`` and ``v``."""
    m, n = len(u), len(v)
    um, vm = u.mean(), v.mean()
    f = float(m * n)
    return np.array([[(a - um) * (b - vm) / f for b in v] for a in u], dtype=float).reshape(m, n)


def cross_corr(u: Vector, v: Vector) -> np.ndarray:
    """Return the element-wise cross-correlation matrix of ``u`` and ``v``."""
    m, n = len(u), len(v)
    f = float(m * n)
    return np.array([[a * b / f for b in v] for a in u], dtype=float).reshape(m, n)


def convolve(u: Sequence[float], v: Sequence[float]) -> Vector:
    """Return the full discrete convolution ``w[k] = sum(u[i] * v[j] for i + j == k)``."""
    if len(u) == 0 or len(v) == 0:
        raise ValueError("convolution requires non-empty vectors")
    return Vector(np.convolve(np.asarray(u, dtype=float), np.asarray(v, dtype=float)).tolist())


def arange(start: int, step: int, stop: int) -> Vector:
    """Return the integers from ``start`` up to ``stop`` (exclusive) by ``step`` as floats."""
    return Vector(float(i) for i in range(start, stop, step))
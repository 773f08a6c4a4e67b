"""Tolerant equality checks for floats, vectors and matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

EPS = 1e-8


def float_equal(x: float, y: float) -> bool:
    """Return True if ``x`` and ``y`` are equal within a relative tolerance of ``EPS``.

    Near zero the comparison falls back to an absolute tolerance.
    """
    if x == y:
        return True
    diff = abs(x - y)
    abs_x, abs_y = abs(x), abs(y)
    if x == 0 or y == 0 or abs_x + abs_y < EPS:
        return diff < EPS
    mean = abs(x + y) / 2.0
    if mean == 0 or math.isnan(mean):
        return False
    return diff / mean < EPS


def vectors_equal(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """Return True if both sequences have the same length and tolerant-equal elements."""
    if len(v1) != len(v2):
        return False
    return all(a == b or float_equal(a, b) for a, b in zip(v1, v2))


def matrices_equal(m1: Iterable[Iterable[float]], m2: Iterable[Iterable[float]]) -> bool:
    """Return True if both matrices have the same shape and tolerant-equal rows."""
    a = np.asarray(m1, dtype=float)
    b = np.asarray(m2, dtype=float)
    if a.shape != b.shape:
        return False
    if a.ndim < 2:
        return vectors_equal(a.ravel().tolist(), b.ravel().tolist())
    return all(vectors_equal(r1.tolist(), r2.tolist()) for r1, r2 in zip(a, b))
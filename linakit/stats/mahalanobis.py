"""Mahalanobis distances."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def _cov(data) -> np.ndarray:
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 2:
        raise ValueError("data must be a two-dimensional matrix")
    return np.atleast_2d(np.cov(arr, rowvar=False))


def _quadratic(diff: np.ndarray, vi: np.ndarray) -> float:
    return math.sqrt(float(diff @ vi @ diff))


def mahalanobis_distance(
    x: Sequence[float] | None, y: Sequence[float] | None, data
) -> float:
    """Return the Mahalanobis distance under the sample covariance of ``data``.

    With ``y`` None the distance is from ``x`` to the mean of ``data``.
    """
    if x is None:
        raise ValueError("at least a non-None x is required")
    arr = np.asarray(data, dtype=float)
    cov = _cov(arr)
    xv = np.asarray(x, dtype=float)
    other = arr.mean(axis=0) if y is None else np.asarray(y, dtype=float)
    if xv.shape != other.shape or xv.shape[0] != cov.shape[0]:
        raise ValueError("vector dimensions do not match the data")
    return _quadratic(xv - other, np.linalg.inv(cov))


def mahalanobis_distance_vi(x: Sequence[float], y: Sequence[float], vi) -> float:
    """Return the Mahalanobis distance between ``x`` and ``y`` given the inverse covariance ``vi``."""
    if len(x) != len(y):
        raise ValueError("x, y should have the same dimension")
    diff = np.asarray(x, dtype=float) - np.asarray(y, dtype=float)
    return _quadratic(diff, np.asarray(vi, dtype=float))
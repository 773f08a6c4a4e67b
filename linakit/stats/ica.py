"""Independent component analysis by the FastICA fixed-point iteration."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from linakit.dataio import random_matrix
from linakit.vector import Vector

logger = logging.getLogger(__name__)

NonLinear = Callable[[Vector, np.ndarray], Vector]


@dataclass(frozen=True)
class ICAResult:
    """FastICA output.

    ``unmixing`` is the estimated unmixing matrix, ``sources`` holds one
    recovered signal per column, and ``whitening`` and ``whitened`` are the
    pre-whitening matrix and the whitened data, or None without whitening.
    """

    unmixing: np.ndarray
    sources: np.ndarray
    whitening: np.ndarray | None
    whitened: np.ndarray | None


def _matrix(data) -> np.ndarray:
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 2:
        raise ValueError("data must be a two-dimensional matrix")
    return arr


def fast_ica(
    components: int,
    tol: float,
    max_iter: int,
    whitening: bool,
    nonlinear: NonLinear,
    data,
) -> ICAResult:
    """Separate ``components`` independent signals from ``data`` (samples x signals)."""
    signals = _matrix(data).T
    n = signals.shape[0]
    if components > n or components < 0:
        raise ValueError("independent components should be between 0 and the number of signals")
    if whitening:
        whitened, k = pre_whitening(components, signals)
        w = compute_unmixing(components, tol, max_iter, nonlinear, whitened)
        return ICAResult(w, (w @ k @ signals).T, k, whitened)
    w = compute_unmixing(components, tol, max_iter, nonlinear, signals)
    return ICAResult(w, (w @ signals).T, None, None)


def pre_whitening(components: int, data) -> tuple[np.ndarray, np.ndarray]:
    """Centre each signal (row) of ``data`` and whiten it.

    Returns the whitened data (components x samples) and the whitening matrix
    (components x signals).
    """
    arr = _matrix(data)
    n, m = arr.shape
    if components > n or components < 0:
        raise ValueError("independent components should be between 0 and the number of signals")
    if m < n:
        raise ValueError("whitening needs at least as many samples as signals")
    centered = arr - arr.mean(axis=1, keepdims=True)
    _, d, vt = np.linalg.svd(centered.T, full_matrices=False)
    if np.any(d == 0):
        raise ValueError("data matrix is rank deficient")
    v = vt.T
    k = v[:components, :n] / d[:n]
    return k @ centered * math.sqrt(m), k


def compute_unmixing(
    components: int, tol: float, max_iter: int, nonlinear: NonLinear, data
) -> np.ndarray:
    """Return a ``components x signals`` matrix of unit rows found by fixed-point iteration."""
    arr = _matrix(data)
    n = arr.shape[0]
    start = random_matrix(components, n)
    rows = []
    iterations = []
    for row in start:
        w = Vector(row).normalize()
        count = 0
        while True:
            wp = Vector(nonlinear(w, arr)).normalize()
            limit = abs(abs(wp.dot(w)) - 1)
            w = wp
            count += 1
            if limit < tol or count >= max_iter:
                break
        iterations.append(count)
        rows.append(list(w))
    logger.debug("iteration times for each component: %s", iterations)
    return np.array(rows, dtype=float).reshape(components, n)


def _update(
    w: Sequence[float], x, derivatives: Callable[[np.ndarray], tuple[np.ndarray, np.ndarray]]
) -> Vector:
    arr = _matrix(x)
    n, m = arr.shape
    wv = np.asarray(w, dtype=float)
    if wv.shape != (n,):
        raise ValueError("w must have one entry per row of x")
    g, gg = derivatives(wv @ arr)
    return Vector((arr @ g - wv * gg.sum()) / m)


def _logcosh(u: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    g = np.tanh(u)
    return g, 1 - g * g


def _exp(u: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    u2 = u * u
    eu2 = np.exp(-u2 / 2)
    return u * eu2, (1 - u2) * eu2


def logcosh_update(w: Sequence[float], x) -> Vector:
    """Return the FastICA update of ``w`` for ``G(u) = log cosh u``."""
    return _update(w, x, _logcosh)


def exp_update(w: Sequence[float], x) -> Vector:
    """Return the FastICA update of ``w`` for ``G(u) = -exp(-u^2 / 2)``."""
    return _update(w, x, _exp)
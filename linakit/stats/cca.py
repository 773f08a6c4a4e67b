"""Canonical correlation analysis via singular value decompositions."""

from __future__ import annotations

import math

import numpy as np

from linakit.vector import Vector


def _centered_svd(arr: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    u, s, vt = np.linalg.svd(arr - arr.mean(axis=0), full_matrices=False)
    if np.any(s == 0):
        raise ValueError("data matrix is rank deficient")
    return u, s, vt.T


def canonical_correlation(x, y) -> tuple[np.ndarray, np.ndarray, Vector]:
    """Return the canonical coefficients ``A``, ``B`` and the canonical correlations.

    Rows are observations; ``x`` and ``y`` must have the same number of rows.
    """
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    if xa.ndim != 2 or ya.ndim != 2:
        raise ValueError("x and y must be two-dimensional matrices")
    if xa.shape[0] != ya.shape[0]:
        raise ValueError("x, y should have the same number of rows (observations)")
    n = xa.shape[0]
    ux, sx, vx = _centered_svd(xa)
    uy, sy, vy = _centered_svd(ya)

    u, s, vt = np.linalg.svd(ux.T @ uy, full_matrices=False)
    scale = math.sqrt(n - 1)
    a = vx @ np.diag(1.0 / sx) @ u * scale
    b = vy @ np.diag(1.0 / sy) @ vt.T * scale
    return a, b, Vector(s)
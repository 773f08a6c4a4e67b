"""Brute-force k-nearest-neighbour search."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from linakit.vector import Vector

DistanceFunc = Callable[[Vector, Vector], float]


def _ranked(data, v: Sequence[float], dist_func: DistanceFunc):
    rows = np.asarray(data, dtype=float)
    if rows.ndim != 2:
        raise ValueError("data must be a two-dimensional matrix")
    query = v if isinstance(v, Vector) else Vector(v)
    distances = [(i, dist_func(query, Vector(row))) for i, row in enumerate(rows)]
    distances.sort(key=lambda pair: pair[1])
    return rows, query, distances


def k_nearest_neighbors(data, v: Sequence[float], k: int, dist_func: DistanceFunc) -> np.ndarray:
    """Return the ``k`` rows of ``data`` nearest to ``v``, nearest first."""
    rows, query, ranked = _ranked(data, v, dist_func)
    k = min(k, len(rows))
    selected = [rows[i] for i, _ in ranked[:k]]
    return np.array(selected, dtype=float).reshape(k, len(query))


def k_nearest_neighbors_with_distance(
    data, v: Sequence[float], k: int, dist_func: DistanceFunc
) -> np.ndarray:
    """Return the ``k`` nearest rows, each followed by its row index and its distance."""
    rows, query, ranked = _ranked(data, v, dist_func)
    k = min(k, len(rows))
    selected = [[*rows[i], float(i), dist] for i, dist in ranked[:k]]
    return np.array(selected, dtype=float).reshape(k, rows.shape[1] + 2)
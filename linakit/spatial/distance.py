"""Point, line and plane distances, vector metrics and the Hausdorff distance."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from linakit.spatial.knn import k_nearest_neighbors_with_distance
from linakit.vector import Vector


def _vec(v: Sequence[float]) -> Vector:
    return v if isinstance(v, Vector) else Vector(v)


def _check_lengths(v1: Sequence[float], v2: Sequence[float]) -> None:
    if len(v1) != len(v2):
        raise ValueError("vectors must have equal length")


def _points(pts) -> np.ndarray:
    arr = np.asarray(pts, dtype=float)
    if arr.ndim != 2:
        raise ValueError("points must form a two-dimensional matrix")
    return arr


@dataclass(frozen=True)
class HausdorffDistance:
    """A directed Hausdorff distance and the row indexes of the pair that attains it."""

    distance: float
    l_index: int
    r_index: int


def point_to_point_distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    return _vec(p1).sub(p2).norm()


def point_to_line_distance(
    pt: Sequence[float], line_pt: Sequence[float], line_dir: Sequence[float]
) -> float:
    """Return the distance from ``pt`` to the line through ``line_pt`` along ``line_dir``."""
    offset = _vec(pt).sub(line_pt)
    direction = _vec(line_dir)
    return offset.sub(direction.mul_num(direction.dot(offset))).norm()


def point_to_plane_distance(
    pt: Sequence[float], plane_center: Sequence[float], plane_normal: Sequence[float]
) -> float:
    """Return the distance from ``pt`` to the plane given by a point and a unit normal."""
    return abs(_vec(plane_normal).dot(_vec(pt).sub(plane_center)))


def directed_hausdorff_distance(pts1, pts2) -> HausdorffDistance:
    """Return the directed Hausdorff distance from ``pts1`` to ``pts2`` with early break."""
    a, b = _points(pts1), _points(pts2)
    if a.shape[1] != b.shape[1]:
        raise ValueError("points should have same coordinates")
    c_max = 0.0
    i_ret = j_ret = 0
    i_store = j_store = 0
    for i, p in enumerate(a):
        c_min = math.inf
        broke = False
        for j, q in enumerate(b):
            d = float(sum((x - y) * (x - y) for x, y in zip(p, q)))
            if d < c_max:
                broke = True
                break
            if d < c_min:
                c_min = d
                i_store, j_store = i, j
        if not broke and c_min != math.inf and c_min > c_max:
            c_max = c_min
            i_ret, j_ret = i_store, j_store
    return HausdorffDistance(math.sqrt(c_max), i_ret, j_ret)


def directed_hausdorff_distance_knn(pts1, pts2) -> HausdorffDistance:
    """Return the directed Hausdorff distance using a nearest-neighbour search per point."""
    a, b = _points(pts1), _points(pts2)
    if a.shape[1] != b.shape[1]:
        raise ValueError("points should have same coordinates")
    l_index = r_index = 0
    dist = 0.0
    for i, p in enumerate(a):
        nearest = k_nearest_neighbors_with_distance(b, Vector(p), 1, squared_euclidean_distance)[0]
        if nearest[-1] > dist:
            dist = float(nearest[-1])
            l_index = i
            r_index = int(nearest[-2])
    return HausdorffDistance(math.sqrt(dist), l_index, r_index)


def taxicab_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the Manhattan (L1) distance."""
    return _vec(v1).sub(v2).abs_sum()


def euclidean_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the Euclidean (L2) distance."""
    return _vec(v1).sub(v2).norm()


def squared_euclidean_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the squared Euclidean distance."""
    return _vec(v1).sub(v2).square_sum()


def minkowski_distance(v1: Sequence[float], v2: Sequence[float], p: float) -> float:
    """Return the Minkowski distance of order ``p``."""
    _check_lengths(v1, v2)
    total = sum(abs(a - b) ** p for a, b in zip(v1, v2))
    return total ** (1.0 / p)


def chebyshev_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the Chebyshev (L-infinity) distance."""
    _check_lengths(v1, v2)
    return max((abs(a - b) for a, b in zip(v1, v2)), default=0.0)


def hamming_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the number of positions at which the elements differ."""
    _check_lengths(v1, v2)
    return float(sum(1 for a, b in zip(v1, v2) if a != b))


def canberra_distance(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Return the Canberra distance; a position where both elements are 0 yields NaN."""
    _check_lengths(v1, v2)
    total = 0.0
    for a, b in zip(v1, v2):
        denominator = abs(a) + abs(b)
        total += math.nan if denominator == 0 else abs(a - b) / denominator
    return total
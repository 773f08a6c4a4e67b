"""3D points held as rows of an ``n x 3`` matrix."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike

import numpy as np

from linakit.dataio import load_3d_matrix
from linakit.vector import Vector


def _as_points(points) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] < 3:
        raise ValueError("points must form an n x 3 matrix")
    if arr.shape[0] == 0:
        raise ValueError("no points given")
    return arr


def points_equal(p1: Sequence[float], p2: Sequence[float]) -> bool:
    """Return True if the x, y and z coordinates of both points are exactly equal."""
    if len(p1) < 3 or len(p2) < 3:
        raise ValueError("points need three coordinates")
    return [float(x) for x in list(p1)[:3]] == [float(x) for x in list(p2)[:3]]


def load_points(path: str | PathLike) -> np.ndarray:
    """Read ``x y z`` lines from a text file into an ``n x 3`` matrix."""
    return load_3d_matrix(path)


def max_xyz(points) -> Vector:
    """Return the largest x, y and z coordinates of the points."""
    return Vector(_as_points(points)[:, :3].max(axis=0))


def min_xyz(points) -> Vector:
    """Return the smallest x, y and z coordinates of the points."""
    return Vector(_as_points(points)[:, :3].min(axis=0))
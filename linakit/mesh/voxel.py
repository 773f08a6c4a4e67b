"""A voxel of points and the plane fitted through them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from linakit.mesh.sets import IntSet
from linakit.vector import Vector


def _points(points) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 3), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError("points must form an n x 3 matrix")
    return arr


def _covariance(points: np.ndarray) -> np.ndarray:
    if len(points) < 2:
        return np.zeros((3, 3), dtype=float)
    return np.cov(points, rowvar=False)


@dataclass(eq=False)
class Voxel:
    """Points sharing one voxel id, with plane fit results and neighbour ids."""

    id: int
    points: np.ndarray
    plane_center: Vector | None = None
    plane_normal: Vector | None = None
    plane_mse: float = 0.0
    plane_curvature: float = 0.0
    neighbor_ids: IntSet = field(default_factory=IntSet)
    is_valid: bool = False
    is_good: bool = False

    def __post_init__(self) -> None:
        self.points = _points(self.points)

    @property
    def num_points(self) -> int:
        """Number of points in the voxel."""
        return len(self.points)

    def add_points(self, points) -> None:
        """Append ``points`` to the voxel."""
        self.points = np.vstack([self.points, _points(points)])

    def compute_plane(self) -> None:
        """Fit a plane by PCA: the normal is the eigenvector of the smallest eigenvalue."""
        if self.num_points == 0:
            raise ValueError("cannot fit a plane to an empty voxel")
        eigenvalues, eigenvectors = np.linalg.eigh(_covariance(self.points))
        self.plane_center = Vector(self.points.mean(axis=0))
        self.plane_normal = Vector(eigenvectors[:, 0])
        self.plane_mse = float(eigenvalues[0])
        total = float(eigenvalues.sum())
        self.plane_curvature = math.nan if total == 0 else self.plane_mse / total

    def normal_similarity(self, other: Voxel) -> float:
        """Return the absolute dot product of both plane normals."""
        if self.plane_normal is None or other.plane_normal is None:
            raise ValueError("plane normal has not been computed")
        return abs(self.plane_normal.dot(other.plane_normal))
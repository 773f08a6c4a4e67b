"""A regular voxel grid laid over a point cloud."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import PathLike

import numpy as np

from linakit.mesh.points import load_points, max_xyz, min_xyz
from linakit.vector import Vector


def _voxel_count(extent: float, size: float) -> int:
    count = math.floor(extent / size)
    return count if math.fmod(extent, size) == 0 else count + 1


@dataclass(frozen=True)
class PointsWithVoxelID:
    """Points together with the voxel id of each point, row by row."""

    points: np.ndarray
    voxel_ids: list[int]

    def __str__(self) -> str:
        return f"Points: \n{self.points}\nVoxelID: \n{self.voxel_ids}\n"


@dataclass
class Grid:
    """Voxel grid; x runs along columns, y along rows and z along depths."""

    voxel_size: tuple[float, float, float]
    grid_size: Vector
    cols: int
    rows: int
    depths: int
    min_xyz: Vector
    max_xyz: Vector
    points: np.ndarray
    num_valid_voxels: int = 0

    @property
    def num_voxels(self) -> int:
        """Total number of voxels in the grid."""
        return self.cols * self.rows * self.depths

    @property
    def num_points(self) -> int:
        """Number of points in the grid."""
        return len(self.points)

    @classmethod
    def from_points(cls, points, voxel_x: float, voxel_y: float, voxel_z: float) -> Grid:
        """Build a grid spanning ``points`` with voxels of the given size."""
        arr = np.asarray(points, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError("points must form an n x 3 matrix")
        sizes = (float(voxel_x), float(voxel_y), float(voxel_z))
        if any(size <= 0 for size in sizes):
            raise ValueError("voxel size must be positive")
        lo, hi = min_xyz(arr), max_xyz(arr)
        extent = hi.sub(lo)
        cols, rows, depths = (_voxel_count(e, s) for e, s in zip(extent, sizes))
        return cls(
            voxel_size=sizes,
            grid_size=extent,
            cols=cols,
            rows=rows,
            depths=depths,
            min_xyz=lo,
            max_xyz=hi,
            points=arr,
        )

    @classmethod
    def from_file(
        cls, path: str | PathLike, voxel_x: float, voxel_y: float, voxel_z: float
    ) -> Grid:
        """Build a grid from an ``x y z`` text file."""
        return cls.from_points(load_points(path), voxel_x, voxel_y, voxel_z)

    def voxel_ids(self) -> PointsWithVoxelID:
        """Return each point's voxel id: ``depth * cols * rows + row * cols + col``."""
        offsets = (self.points - np.asarray(self.min_xyz)) / np.asarray(self.voxel_size)
        idx = np.floor(offsets).astype(int)
        ids = idx[:, 2] * (self.cols * self.rows) + idx[:, 1] * self.cols + idx[:, 0]
        return PointsWithVoxelID(self.points, [int(i) for i in ids])

    def grid_coord(self, voxel_id: int) -> tuple[int, int, int]:
        """Return the ``(col, row, depth)`` position of a voxel id."""
        if voxel_id < 0:
            raise ValueError("voxel id must not be negative")
        depth, rest = divmod(voxel_id, self.cols * self.rows)
        row, col = divmod(rest, self.cols)
        return col, row, depth
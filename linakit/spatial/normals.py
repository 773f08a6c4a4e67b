"""Plane normal estimation from point sets."""

from __future__ import annotations

import numpy as np

from linakit.vector import Vector


def _validate(points) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2:
        raise ValueError("points must form a two-dimensional matrix")
    rows, cols = arr.shape
    if cols > 3:
        raise ValueError("only 3D points are supported")
    if rows < 3:
        raise ValueError("not enough points to fit a plane")
    return arr


def plane_pca_eigen(points) -> Vector:
    """Return the plane normal as the covariance eigenvector of the smallest eigenvalue."""
    arr = _validate(points)
    cov = np.atleast_2d(np.cov(arr, rowvar=False))
    _, eigenvectors = np.linalg.eigh(cov)
    return Vector(eigenvectors[:, 0])


def plane_pca_svd(points) -> Vector:
    """Return the plane normal as the right singular vector of the smallest singular value."""
    arr = _validate(points)
    centered = arr - arr.mean(axis=0)
    _, _, vt = np.linalg.svd(centered, full_matrices=False)
    return Vector(vt[-1])


def plane_linear_solve_weighted(points) -> Vector:
    """Return the plane normal from axis-wise least squares solutions, weighted by determinant."""
    arr = _validate(points)
    if arr.shape[1] != 3:
        raise ValueError("only 3D points are supported")
    cov = np.cov(arr, rowvar=False)
    xx, xy, xz = cov[0, 0], cov[0, 1], cov[0, 2]
    yy, yz, zz = cov[1, 1], cov[1, 2], cov[2, 2]

    det_x = yy * zz - yz * yz
    det_y = xx * zz - xz * xz
    det_z = xx * yy - xy * xy
    candidates = (
        (det_x, Vector((det_x, xz * yz - xy * zz, xy * yz - xz * yy))),
        (det_y, Vector((xz * yz - xy * zz, det_y, xy * xz - yz * xx))),
        (det_z, Vector((xy * yz - xz * yy, xy * xz - yz * xx, det_z))),
    )

    weighted = Vector((0.0, 0.0, 0.0))
    for det, axis_dir in candidates:
        weight = det * det
        if weighted.dot(axis_dir) < 0.0:
            weight = -weight
        weighted = weighted.add(axis_dir.mul_num(weight))
    return weighted.normalize()
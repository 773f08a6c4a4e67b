"""Random test data and plain-text matrix files."""

from __future__ import annotations

import random
from os import PathLike

import numpy as np

from linakit.vector import Vector

_StrPath = str | PathLike


def random_float() -> float:
    """Return a random float in the open interval (-1, 1)."""
    return random.random() - random.random()


def random_vector(size: int) -> Vector:
    """Return a vector of ``size`` random floats in (-1, 1)."""
    return Vector(random_float() for _ in range(size))


def random_symmetric_33_matrix() -> np.ndarray:
    """Return a random symmetric 3 x 3 matrix."""
    d0, d1, d2, e01, e02, e12 = random_vector(6)
    return np.array(
        [
            [d0, e01, e02],
            [e01, d1, e12],
            [e02, e12, d2],
        ],
        dtype=float,
    )


def random_square_matrix(size: int) -> np.ndarray:
    """Return a random ``size x size`` matrix."""
    return random_matrix(size, size)


def random_matrix(rows: int, cols: int) -> np.ndarray:
    """Return a random ``rows x cols`` matrix with entries in (-1, 1)."""
    return np.array([list(random_vector(cols)) for _ in range(rows)], dtype=float).reshape(
        rows, cols
    )


def _load_columns(path: _StrPath, width: int) -> np.ndarray:
    rows: list[list[float]] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            tokens = line.split()
            if len(tokens) != width:
                break
            try:
                rows.append([float(token) for token in tokens])
            except ValueError:
                break
    if not rows:
        return np.empty((0, width), dtype=float)
    return np.array(rows, dtype=float)


def load_3d_matrix(path: _StrPath) -> np.ndarray:
    """Read whitespace-separated ``x y z`` lines into an ``n x 3`` matrix.

    Reading stops at the first line that does not hold exactly three numbers.
    """
    return _load_columns(path, 3)


def load_2d_matrix(path: _StrPath) -> np.ndarray:
    """Read whitespace-separated ``x y`` lines into an ``n x 2`` matrix.

    Reading stops at the first line that does not hold exactly two numbers.
    """
    return _load_columns(path, 2)


def write_matrix_txt(path: _StrPath, matrix) -> None:
    """Write a matrix to a text file, one row per line, each value as ``%f``."""
    data = np.asarray(matrix, dtype=float)
    if data.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    with open(path, "w", encoding="utf-8") as handle:
        for row in data:
            handle.write("".join(f"{value:f} " for value in row))
            if len(row):
                handle.write("\n")
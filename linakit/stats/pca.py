"""Principal component analysis by eigen-decomposition of the covariance matrix."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from linakit.vector import Vector


def principal_components(
    data, weights: Sequence[float] | None = None
) -> tuple[np.ndarray, Vector]:
    """Return the principal directions as columns and their variances, largest first.

    With ``weights`` each row of ``data`` is scaled by its weight before the
    covariance is built.
    """
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 2:
        raise ValueError("data must be a two-dimensional matrix")
    if weights is not None:
        if len(weights) != arr.shape[0]:
            raise ValueError("length of weights should equal the number of data rows")
        arr = arr * np.asarray(weights, dtype=float)[:, None]
    cov = np.atleast_2d(np.cov(arr, rowvar=False))
    eigenvalues, eigenvectors = np.linalg.eigh(cov)
    order = slice(None, None, -1)
    return eigenvectors[:, order].copy(), Vector(eigenvalues[order])
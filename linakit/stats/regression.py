"""Simple linear regression."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from linakit.stats.descriptive import covariance, variance
from linakit.vector import Vector


@dataclass(frozen=True)
class RegressionResult:
    """Fit of ``y = alpha + beta * x``; ``r_squared`` is 0 when not computed."""

    alpha: float
    beta: float
    r_squared: float = 0.0


def simple_linear_regression(
    x: Sequence[float],
    y: Sequence[float],
    weights: Sequence[float] | None = None,
    origin: bool = False,
    compute_r_squared: bool = False,
) -> RegressionResult:
    """Fit ``y = alpha + beta * x`` by least squares.

    With ``origin`` the line passes through the origin and ``weights`` weight
    the fit; otherwise the fit is unweighted and ``weights`` only weight the
    coefficient of determination.
    """
    xv = x if isinstance(x, Vector) else Vector(x)
    yv = y if isinstance(y, Vector) else Vector(y)
    if len(xv) != len(yv):
        raise ValueError("x, y length mismatch")
    if weights is not None and len(weights) != len(xv):
        raise ValueError("x, weights length mismatch")
    ws = [1.0] * len(xv) if weights is None else [float(w) for w in weights]

    if origin:
        xx = sum(w * xi * xi for w, xi in zip(ws, xv))
        xy = sum(w * xi * yi for w, xi, yi in zip(ws, xv, yv))
        return RegressionResult(0.0, xy / xx)

    beta = covariance(xv, yv) / variance(xv)
    y_mean = yv.mean()
    alpha = y_mean - beta * xv.mean()
    if not compute_r_squared:
        return RegressionResult(alpha, beta)

    numerator = sum(w * (yi - alpha - beta * xi) ** 2 for w, xi, yi in zip(ws, xv, yv))
    denominator = sum(w * (yi - y_mean) ** 2 for w, yi in zip(ws, yv))
    return RegressionResult(alpha, beta, 1 - numerator / denominator)
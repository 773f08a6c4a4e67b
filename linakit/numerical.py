"""Numerical differentiation and Gauss-Legendre quadrature."""

from __future__ import annotations

from collections.abc import Callable

FloatFunc = Callable[[float], float]

_GAUSS_LEGENDRE: dict[int, tuple[tuple[float, ...], tuple[float, ...]]] = {
    1: ((0.0,), (2.0,)),
    2: ((-0.5773502691896257, 0.5773502691896257), (1.0, 1.0)),
    3: (
        (0.0, -0.7745966692414834, 0.7745966692414834),
        (0.8888888888888888, 0.5555555555555556, 0.5555555555555556),
    ),
    4: (
        (-0.3399810435848563, 0.3399810435848563, -0.8611363115940526, 0.8611363115940526),
        (0.6521451548625461, 0.6521451548625461, 0.3478548451374538, 0.3478548451374538),
    ),
    5: (
        (0.0, -0.5384693101056831, 0.5384693101056831, -0.9061798459386640, 0.9061798459386640),
        (
            0.5688888888888888,
            0.4786286704993665,
            0.4786286704993665,
            0.2369268850561891,
            0.2369268850561891,
        ),
    ),
}


def first_order_diff(f: FloatFunc, h: float = 0.0) -> FloatFunc:
    """Return the central-difference derivative of ``f`` with step ``h`` (1e-3 when 0)."""
    step = 1e-3 if h == 0.0 else h

    def derivative(x: float) -> float:
        return (f(x + step) - f(x - step)) / (2 * step)

    return derivative


def gaussian_quadrature_points_weights(num_points: int) -> tuple[list[float], list[float]]:
    """Return Gauss-Legendre points and weights on [-1, 1] for 1 to 5 points."""
    try:
        points, weights = _GAUSS_LEGENDRE[num_points]
    except KeyError:
        raise ValueError("only 1 to 5 quadrature points are supported") from None
    return list(points), list(weights)


def change_interval(f: FloatFunc, a: float, b: float) -> FloatFunc:
    """Return ``f`` mapped from [a, b] onto [-1, 1], scaled by the Jacobian."""

    def mapped(x: float) -> float:
        return (b - a) / 2 * f((b - a) / 2 * x + (a + b) / 2)

    return mapped


def gaussian_quadrature(f: FloatFunc, a: float, b: float, num_points: int) -> float:
    """Integrate ``f`` over [a, b] with ``num_points``-point Gauss-Legendre quadrature."""
    points, weights = gaussian_quadrature_points_weights(num_points)
    mapped = change_interval(f, a, b)
    return sum(w * mapped(x) for x, w in zip(points, weights))
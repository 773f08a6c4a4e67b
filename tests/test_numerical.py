import math

import pytest

from linakit.numerical import (
    change_interval,
    first_order_diff,
    gaussian_quadrature,
    gaussian_quadrature_points_weights,
)


def test_first_order_diff_sin():
    assert first_order_diff(math.sin, 0)(10) == pytest.approx(math.cos(10), rel=1e-6)


def test_first_order_diff_custom_step():
    assert first_order_diff(lambda x: x * x, 0.5)(3.0) == pytest.approx(6.0)


def test_gaussian_quadrature_sin_symmetric():
    assert gaussian_quadrature(math.sin, -math.pi / 2, math.pi / 2, 1) == pytest.approx(
        0.0, abs=1e-12
    )


def test_gaussian_quadrature_exact_for_cubic():
    assert gaussian_quadrature(lambda x: x**3, 0.0, 1.0, 2) == pytest.approx(0.25)


def test_gaussian_quadrature_five_points():
    assert gaussian_quadrature(math.exp, 0.0, 1.0, 5) == pytest.approx(math.e - 1, rel=1e-9)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_weights_sum_to_interval_length(n):
    points, weights = gaussian_quadrature_points_weights(n)
    assert len(points) == n
    assert sum(weights) == pytest.approx(2.0)


def test_unsupported_point_count():
    with pytest.raises(ValueError):
        gaussian_quadrature_points_weights(6)


def test_change_interval_constant():
    assert change_interval(lambda x: 1.0, 0.0, 4.0)(0.3) == pytest.approx(2.0)
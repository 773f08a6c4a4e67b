import pytest

from linakit.compare import float_equal, vectors_equal
from linakit.stats.descriptive import (
    BinRule,
    bin_count,
    coefficient_of_variance,
    correlation_coefficient,
    covariance,
    equal_bin_width,
    histogram,
    linear_kernel,
    mode,
    poly_kernel,
    rbf_kernel,
    sigmoid_kernel,
    standard_deviation,
    standard_error,
    standard_score,
    variance,
)
from linakit.vector import Vector

SAMPLE = [1, 5, 7, 2, 6, 9]


def test_linear_kernel():
    assert linear_kernel(Vector([1, 2, 3]), Vector([3, 2, 1])) == 10.0


def test_poly_kernel():
    assert poly_kernel(Vector([1, 2, 3]), Vector([3, 2, 1]), -1, 2, 3) == -512.0


def test_rbf_kernel():
    assert float_equal(rbf_kernel(Vector([1, 2, 3]), Vector([3, 2, 1]), 0.5), 0.018315639)


def test_sigmoid_kernel():
    assert float_equal(sigmoid_kernel(Vector([1, 2, 3]), Vector([3, 2, 1]), 0.2, 0.5), 0.986614298)


def test_mode():
    res = mode(Vector([1, 5, 7, 2, 6, 9, 3, 3, 2, 1, 8]))
    assert len(res) == 3
    assert set(res) == {1.0, 2.0, 3.0}


def test_mode_empty():
    assert len(mode(Vector())) == 0


def test_covariance():
    assert float_equal(2.1666666666666665, covariance(Vector(SAMPLE), Vector([1, 2, 3, 1, 2, 3])))


def test_covariance_length_mismatch():
    with pytest.raises(ValueError):
        covariance([1, 2, 3], [1, 2])


def test_variance():
    assert float_equal(7.666666666666667, variance(Vector(SAMPLE)))


def test_standard_deviation():
    assert float_equal(2.768874621, standard_deviation(Vector(SAMPLE)))


def test_standard_score():
    assert float_equal(-1.444630237, standard_score(1, Vector(SAMPLE)))


def test_standard_error():
    assert float_equal(1.130388331, standard_error(Vector(SAMPLE)))


def test_coefficient_of_variance():
    assert float_equal(0.553774924, coefficient_of_variance(Vector(SAMPLE)))


def test_correlation_coefficient():
    assert float_equal(0.95837272, correlation_coefficient(Vector(SAMPLE), Vector([1, 2, 3, 1, 2, 3])))


def test_correlation_coefficient_length_mismatch():
    with pytest.raises(ValueError):
        correlation_coefficient([1, 2], [1, 2, 3])


def test_histogram():
    data = Vector([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    dividers = Vector([-1, 2, 4, 5, 8, 11])
    assert vectors_equal(histogram(dividers, data, None), Vector([2, 2, 1, 3, 3]))


def test_histogram_counts_sum_to_data_length():
    data = [3, 0, 9, 4, 1, 7]
    hist = histogram([11, -1, 5], data)
    assert sum(hist) == len(data)


def test_histogram_weights():
    data = [0, 1, 2, 3]
    hist = histogram([0, 2, 4], data, [1, 1, 10, 10])
    assert list(hist) == [2.0, 20.0]


def test_histogram_two_dividers_returns_sorted_data():
    assert list(histogram([0, 10], [3, 1, 2])) == [1.0, 2.0, 3.0]


def test_histogram_rejects_single_divider():
    with pytest.raises(ValueError):
        histogram([0], [0])


def test_histogram_rejects_data_out_of_range():
    with pytest.raises(ValueError):
        histogram([0, 5, 10], [1, 10])


@pytest.mark.parametrize(
    "n, rule, expected",
    [(100, BinRule.SQRT, 10), (8, "Sturges", 4), (8, BinRule.RICE, 4)],
)
def test_bin_count(n, rule, expected):
    assert bin_count(n, rule) == expected


def test_bin_count_rejects_unknown_rule():
    with pytest.raises(ValueError):
        bin_count(10, "Scott")


def test_bin_count_rejects_non_positive():
    with pytest.raises(ValueError):
        bin_count(0, BinRule.SQRT)


def test_equal_bin_width_spans_range():
    data = [2, 9, 4, 1]
    width = equal_bin_width(4, data)
    assert width * 4 == max(data) - min(data)
"""Kernels, descriptive statistics, bin rules and histograms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

from linakit.vector import Vector


def _vec(x: Sequence[float]) -> Vector:
    return x if isinstance(x, Vector) else Vector(x)


def _check_same_length(x: Sequence[float], y: Sequence[float], names: str = "x, y") -> None:
    if len(x) != len(y):
        raise ValueError(f"{names} length mismatch")


class BinRule(str, Enum):
    """Rules for choosing the number of histogram bins."""

    SQRT = "Sqrt"
    STURGES = "Sturges"
    RICE = "Rice"


def linear_kernel(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the linear kernel ``a . b``."""
    return _vec(a).dot(b)


def poly_kernel(
    a: Sequence[float], b: Sequence[float], gamma: float, coef0: float, degree: float
) -> float:
    """Return the polynomial kernel ``(gamma * a . b + coef0) ** degree``."""
    return math.pow(gamma * _vec(a).dot(b) + coef0, degree)


def rbf_kernel(a: Sequence[float], b: Sequence[float], gamma: float) -> float:
    """Return the radial basis function kernel ``exp(-gamma * |a - b|^2)``."""
    return math.exp(-gamma * _vec(a).sub(b).square_sum())


def sigmoid_kernel(a: Sequence[float], b: Sequence[float], gamma: float, coef0: float) -> float:
    """Return the sigmoid kernel ``tanh(gamma * a . b + coef0)``."""
    return math.tanh(gamma * _vec(a).dot(b) + coef0)


def mode(x: Sequence[float]) -> Vector:
    """Return every most frequent value, in order of first appearance."""
    counts = _vec(x).unique_with_count()
    if not counts:
        return Vector()
    top = max(counts.values())
    return Vector(value for value, count in counts.items() if count == top)


def variance(x: Sequence[float]) -> float:
    """Return the population variance."""
    return _vec(x).variance()


def standard_deviation(x: Sequence[float]) -> float:
    """Return the population standard deviation."""
    return _vec(x).standard_deviation()


def standard_score(xi: float, x: Sequence[float]) -> float:
    """Return the z-score of ``xi`` relative to the values ``x``."""
    vec = _vec(x)
    return (xi - vec.mean()) / standard_deviation(vec)


def standard_error(x: Sequence[float]) -> float:
    """Return the standard error of the mean."""
    vec = _vec(x)
    return standard_deviation(vec) / math.sqrt(len(vec))


def coefficient_of_variance(x: Sequence[float]) -> float:
    """Return the relative standard deviation ``std / mean``."""
    vec = _vec(x)
    return standard_deviation(vec) / vec.mean()


def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    """Return the biased (population) covariance of ``x`` and ``y``."""
    _check_same_length(x, y)
    xv, yv = _vec(x), _vec(y)
    return xv.sub_num(xv.mean()).dot(yv.sub_num(yv.mean())) / len(xv)


def correlation_coefficient(x: Sequence[float], y: Sequence[float]) -> float:
    """Return the Pearson correlation coefficient of ``x`` and ``y``."""
    _check_same_length(x, y)
    xv, yv = _vec(x), _vec(y)
    ex, ey = xv.sub_num(xv.mean()), yv.sub_num(yv.mean())
    return ex.dot(ey) / math.sqrt(ex.square_sum() * ey.square_sum())


def bin_count(n: int, rule: BinRule | str) -> int:
    """Return the number of histogram bins for ``n`` data points under ``rule``."""
    if n < 1:
        raise ValueError("invalid number of data points")
    try:
        chosen = BinRule(rule)
    except ValueError:
        raise ValueError("only Sqrt, Sturges and Rice are supported") from None
    if chosen is BinRule.SQRT:
        return math.ceil(math.sqrt(n))
    if chosen is BinRule.STURGES:
        return math.ceil(math.log2(n)) + 1
    return math.ceil(2 * math.pow(n, 1.0 / 3.0))


def equal_bin_width(bin_num: int, data: Sequence[float]) -> float:
    """Return the width of ``bin_num`` equal bins spanning the range of ``data``."""
    vec = _vec(data)
    _, high = vec.max()
    _, low = vec.min()
    return (high - low) / bin_num


def _is_sorted(values: Sequence[float]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def histogram(
    dividers: Sequence[float],
    data: Sequence[float],
    weights: Sequence[float] | None = None,
) -> Vector:
    """Return the weighted count of ``data`` in each half-open bin ``[d[i], d[i+1])``.

    Unsorted dividers and data are sorted first; weights are matched to the
    sorted data by position. With exactly two dividers the sorted data is
    returned unchanged.
    """
    div = _vec(dividers)
    values = _vec(data)
    if len(div) < 2:
        raise ValueError("histogram requires 2 dividers (lower, upper range) at least")
    if not _is_sorted(div):
        div = div.sorted_ascending()
    if not _is_sorted(values):
        values = values.sorted_ascending()
    if div.at(0) > values.at(0) or div.at(-1) <= values.at(-1):
        raise ValueError("data range should be within divider range")
    if len(div) == 2:
        return values

    counts = [0.0] * (len(div) - 1)
    idx, upper = 0, div[1]
    for i, x in enumerate(values):
        w = 1.0 if weights is None else weights[i]
        if x >= upper:
            # dividers may repeat, so skip every bin whose upper edge is not above x
            for j in range(idx + 1, len(div) - 1):
                if x < div[j + 1]:
                    idx, upper = j, div[j + 1]
                    break
        counts[idx] += w
    return Vector(counts)
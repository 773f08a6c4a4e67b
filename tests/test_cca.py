import numpy as np
import pytest

from linakit.stats.cca import canonical_correlation

X = [
    [5.1, 3.5],
    [4.9, 3.0],
    [4.7, 3.2],
    [4.6, 3.1],
    [5.0, 3.6],
    [5.4, 3.9],
    [4.6, 3.4],
    [5.0, 3.4],
    [4.4, 2.9],
    [4.9, 3.1],
]
Y = [
    [1.4, 0.2],
    [1.4, 0.2],
    [1.3, 0.2],
    [1.5, 0.2],
    [1.4, 0.2],
    [1.7, 0.4],
    [1.4, 0.3],
    [1.5, 0.2],
    [1.4, 0.2],
    [1.5, 0.1],
]
EXPECTED_A = np.array(
    [[-1.9794877596804641, -5.2016325219025124], [4.5211829944066553, 2.7263663170835697]]
)
EXPECTED_B = np.array(
    [[-0.0613084818030103, -10.8514169865438941], [12.7209032660734298, 7.6793888180353775]]
)


def test_canonical_correlation_values():
    a, b, r = canonical_correlation(X, Y)
    assert list(r) == pytest.approx([0.7250624174504773, 0.5547679185730191], rel=1e-7)
    for j in range(2):
        # singular vectors are defined up to a sign shared by A's and B's column
        sign = 1.0 if np.sign(a[0, j]) == np.sign(EXPECTED_A[0, j]) else -1.0
        assert list(a[:, j] * sign) == pytest.approx(list(EXPECTED_A[:, j]), rel=1e-6)
        assert list(b[:, j] * sign) == pytest.approx(list(EXPECTED_B[:, j]), rel=1e-6)


def test_canonical_variates_have_unit_variance():
    a, b, _ = canonical_correlation(X, Y)
    xa = np.asarray(X) - np.mean(X, axis=0)
    u = xa @ a
    assert np.allclose(np.var(u, axis=0, ddof=1), 1.0)


def test_correlations_descending_and_bounded():
    _, _, r = canonical_correlation(X, Y)
    assert list(r) == sorted(r, reverse=True)
    assert all(0.0 <= c <= 1.0 + 1e-12 for c in r)


def test_row_mismatch():
    with pytest.raises(ValueError):
        canonical_correlation(X, Y[:5])
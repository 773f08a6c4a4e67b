import random

import numpy as np
import pytest

from linakit.stats.ica import (
    compute_unmixing,
    exp_update,
    fast_ica,
    logcosh_update,
    pre_whitening,
)
from linakit.vector import Vector


def _mixed():
    t = np.linspace(0.0, 8.0, 200)
    sources = np.column_stack([np.sin(2 * t), np.sign(np.sin(3 * t))])
    mixing = np.array([[1.0, 0.5], [0.3, 1.0]])
    return sources @ mixing.T


def test_fast_ica_with_whitening_shapes_and_unit_rows():
    random.seed(1)
    data = _mixed()
    result = fast_ica(2, 1e-6, 200, True, logcosh_update, data)
    assert result.sources.shape == (200, 2)
    assert result.unmixing.shape == (2, 2)
    assert result.whitening.shape == (2, 2)
    assert result.whitened.shape == (2, 200)
    assert np.allclose(np.linalg.norm(result.unmixing, axis=1), 1.0)


def test_fast_ica_without_whitening():
    random.seed(2)
    result = fast_ica(2, 1e-6, 50, False, exp_update, _mixed())
    assert result.whitening is None
    assert result.whitened is None
    assert result.sources.shape == (200, 2)
    assert np.allclose(np.linalg.norm(result.unmixing, axis=1), 1.0)


@pytest.mark.parametrize("components", [3, -1])
def test_fast_ica_rejects_bad_component_count(components):
    with pytest.raises(ValueError):
        fast_ica(components, 1e-6, 10, True, logcosh_update, _mixed())


def test_pre_whitening_rows_are_centred():
    whitened, k = pre_whitening(2, _mixed().T)
    assert k.shape == (2, 2)
    assert np.allclose(whitened.mean(axis=1), 0.0)


def test_pre_whitening_needs_enough_samples():
    with pytest.raises(ValueError):
        pre_whitening(1, np.ones((3, 2)))


def test_compute_unmixing_single_iteration_unit_rows():
    random.seed(3)
    w = compute_unmixing(2, 1e-6, 1, logcosh_update, _mixed().T)
    assert w.shape == (2, 2)
    assert np.allclose(np.linalg.norm(w, axis=1), 1.0)


@pytest.mark.parametrize("update", [logcosh_update, exp_update])
def test_update_on_zero_data_negates_w(update):
    w = Vector([0.6, 0.8])
    assert list(update(w, np.zeros((2, 5)))) == [-0.6, -0.8]


def test_update_rejects_wrong_w_length():
    with pytest.raises(ValueError):
        logcosh_update(Vector([1.0, 0.0, 0.0]), np.zeros((2, 5)))
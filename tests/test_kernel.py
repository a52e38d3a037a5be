"""
Test cases for the kernel functions, the banded kernel table and the median heuristic for the kernel scale.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from npmojo.enums import KernelFamily
from npmojo.exceptions import ConfigurationError, InvalidParameterError
from npmojo.kernel import WindowBlocks, evaluate, kernel_band, median_distance, resolve_scale


ALL_FAMILIES = list(KernelFamily)


@pytest.mark.parametrize("family", ALL_FAMILIES)
def test_kernel_is_symmetric(family, rng):
    x = rng.standard_normal((50, 3))
    y = rng.standard_normal((50, 3))
    assert np.array_equal(evaluate(x, y, family, 0.7), evaluate(y, x, family, 0.7))


@pytest.mark.parametrize("family", [f for f in ALL_FAMILIES if f is not KernelFamily.euclidean])
def test_kernel_is_one_on_the_diagonal(family, rng):
    x = rng.standard_normal(4)
    assert evaluate(x, x, family, 1.3) == pytest.approx(1.0)


def test_euclidean_kernel_is_zero_on_the_diagonal_and_a_distance_power():
    x = np.array([0.0, 0.0])
    y = np.array([3.0, 4.0])
    assert evaluate(x, x, "euclidean", 1.0) == 0.0
    assert evaluate(x, y, "euclidean", 1.0) == pytest.approx(5.0)
    assert evaluate(x, y, "euclidean", 0.5) == pytest.approx(np.sqrt(5.0))


def test_single_pair_returns_float_and_broadcast_returns_matrix(rng):
    X = rng.standard_normal((12, 2))
    assert isinstance(evaluate(X[0], X[1], "gauss", 1.0), float)
    K = evaluate(X[:, None, :], X[None, :, :], "gauss", 1.0)
    assert K.shape == (12, 12)
    assert np.allclose(np.diag(K), 1.0)


def test_unknown_family_is_rejected():
    with pytest.raises(ConfigurationError, match="kernel family"):
        evaluate(np.zeros(2), np.ones(2), "cosine", 1.0)


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_nonpositive_scale_is_rejected(scale):
    with pytest.raises(InvalidParameterError):
        evaluate(np.zeros(2), np.ones(2), "gauss", scale)


def test_window_blocks_match_full_kernel_matrix(rng):
    Y = rng.standard_normal((40, 2))
    size = 10
    blocks = WindowBlocks(kernel_band(Y, size, KernelFamily.quad_exp, 0.9), size)
    for start in (0, 7, 30):
        window = Y[start:start + size]
        full = evaluate(window[:, None, :], window[None, :, :], "quad.exp", 0.9)
        assert np.allclose(blocks.block(start), full)


def test_kernel_band_marks_entries_past_the_end_as_nan(rng):
    Y = rng.standard_normal((6, 1))
    band = kernel_band(Y, 3, KernelFamily.laplace, 1.0)
    assert band.shape == (6, 3)
    assert np.isnan(band[5, 1]) and np.isnan(band[4, 2])
    assert np.all(np.isfinite(band[:4]))


def test_window_blocks_reject_a_narrow_band(rng):
    band = kernel_band(rng.standard_normal((10, 1)), 4, KernelFamily.gauss, 1.0)
    with pytest.raises(InvalidParameterError):
        WindowBlocks(band, 6)


def test_median_heuristic_scale_per_family():
    Y = np.array([[0.0], [1.0], [3.0]])
    # pairwise distances 1, 3, 2
    assert median_distance(Y) == pytest.approx(2.0)
    assert median_distance(Y, use_mean=True) == pytest.approx(2.0)
    assert resolve_scale(Y, KernelFamily.gauss, 1.0, True) == pytest.approx(0.5)
    assert resolve_scale(Y, KernelFamily.laplace, 1.0, True) == pytest.approx(0.5)
    assert resolve_scale(Y, KernelFamily.quad_exp, 1.0, True) == pytest.approx(2.0)
    assert resolve_scale(Y, KernelFamily.sine, 1.0, True) == pytest.approx(2.0)
    assert resolve_scale(Y, KernelFamily.euclidean, 1.0, True) == 1.0
    assert resolve_scale(Y, KernelFamily.gauss, 0.3, False) == 0.3


def test_median_heuristic_keeps_configured_scale_for_constant_data(caplog):
    Y = np.ones((20, 2))
    with caplog.at_level("WARNING"):
        assert resolve_scale(Y, KernelFamily.gauss, 0.7, True) == 0.7
    assert "keeping configured scale" in caplog.text


def test_median_heuristic_thins_long_series(monkeypatch, rng):
    from config import settings

    Y = rng.standard_normal((2000, 1))
    monkeypatch.setattr(settings, "kernel_heuristic_max_points", 200)
    thinned = median_distance(Y)
    assert thinned == pytest.approx(median_distance(Y, max_points=2000), rel=0.2)
    assert median_distance(Y[:1]) == 0.0

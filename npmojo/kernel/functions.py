"""
Kernel functions for the characteristic-function distance between lagged observation vectors, evaluated pointwise with broadcasting and as banded tables over a sliding window.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Callable, Dict, Union

import numpy as np

from npmojo.enums import KernelFamily
from npmojo.exceptions import InvalidParameterError


def _quad_exp(d: np.ndarray, a: float) -> np.ndarray:
    d2 = d * d
    return np.prod((2.0 * a - d2) * np.exp(-d2 / (4.0 * a)) / (2.0 * a), axis=-1)


def _gauss(d: np.ndarray, a: float) -> np.ndarray:
    return np.exp(-(a * a) / 2.0 * np.sum(d * d, axis=-1))


def _euclidean(d: np.ndarray, a: float) -> np.ndarray:
    return np.sqrt(np.sum(d * d, axis=-1)) ** a


def _laplace(d: np.ndarray, a: float) -> np.ndarray:
    return np.prod(1.0 / (1.0 + (a * a) * (d * d)), axis=-1)


def _sine(d: np.ndarray, a: float) -> np.ndarray:
    ad = np.abs(d)
    # the bracketed pair is summed first so that h(x, y) == h(y, x) exactly
    return np.prod((-2.0 * ad + (np.abs(d - 2.0 * a) + np.abs(d + 2.0 * a))) / (4.0 * a), axis=-1)


_KERNELS: Dict[KernelFamily, Callable[[np.ndarray, float], np.ndarray]] = {
    KernelFamily.quad_exp: _quad_exp,
    KernelFamily.gauss: _gauss,
    KernelFamily.euclidean: _euclidean,
    KernelFamily.laplace: _laplace,
    KernelFamily.sine: _sine,
}


def evaluate(
    x: np.ndarray,
    y: np.ndarray,
    family: Union[KernelFamily, str],
    scale: float,
) -> Union[np.ndarray, float]:
    """Evaluate ``h(x, y)`` over the last axis of ``x`` and ``y``.

    Leading axes broadcast, so ``evaluate(X[:, None], X[None], ...)`` yields a
    full kernel matrix while two aligned ``(m, d)`` arrays give ``m`` values.
    A pair of plain vectors returns a float.
    """
    family = KernelFamily.parse(family)
    if not scale > 0:
        raise InvalidParameterError(f"Kernel scale must be positive, got {scale!r}.")
    xa = np.asarray(x, dtype=float)
    ya = np.asarray(y, dtype=float)
    values = _KERNELS[family](xa - ya, float(scale))
    if np.ndim(values) == 0:
        return float(values)
    return values


def kernel_band(lagged: np.ndarray, width: int, family: KernelFamily, scale: float) -> np.ndarray:
    """Kernel values ``band[s, j] = h(Y[s], Y[s + j])`` for ``0 <= j < width``.

    Entries with ``s + j`` past the end of the series are NaN and never read.
    Memory is ``O(len(lagged) * width)``.
    """
    m = lagged.shape[0]
    band = np.full((m, width), np.nan)
    for j in range(min(width, m)):
        band[: m - j, j] = evaluate(lagged[: m - j], lagged[j:], family, scale)
    return band


class WindowBlocks:
    """Gathers the ``size x size`` kernel block of a window out of a band table."""

    def __init__(self, band: np.ndarray, size: int) -> None:
        if band.shape[1] < size:
            raise InvalidParameterError(
                f"Band of width {band.shape[1]} cannot serve windows of size {size}."
            )
        self.band = band
        self.size = size
        idx = np.arange(size)
        self._rows = np.minimum.outer(idx, idx)
        self._offsets = np.abs(np.subtract.outer(idx, idx))

    def block(self, start: int) -> np.ndarray:
        return self.band[start + self._rows, self._offsets]

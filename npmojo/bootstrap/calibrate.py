"""
Multiplier bootstrap calibration of the detector threshold.

Each replicate reweights the kernel block of every window pair by a dependent
multiplier sequence and records the maximum over all split points; the
threshold is the ``1 - alpha`` quantile of those maxima. Replicates are split
into contiguous chunks that run through :mod:`joblib` and write into slots
indexed by replicate number, so the outcome does not depend on ``n_jobs``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

import numpy as np
from joblib import Parallel, delayed

from config import settings
from npmojo.bootstrap.multipliers import multipliers, window_length
from npmojo.enums import BootMethod, KernelFamily
from npmojo.exceptions import InvalidParameterError
from npmojo.kernel.functions import WindowBlocks
from npmojo.statistic.mosum import sign_vector, statistic_scale

log = logging.getLogger(__name__)

SeedLike = Union[int, np.random.SeedSequence, None]


def _check(alpha: float, reps: int, boot_dep: float) -> None:
    if not 0.0 <= alpha <= 1.0:
        raise InvalidParameterError(f"alpha must lie in [0, 1], got {alpha!r}.")
    if int(reps) != reps or reps <= 0:
        raise InvalidParameterError(f"reps must be a positive integer, got {reps!r}.")
    window_length(boot_dep)


def _seed_sequence(seed: SeedLike) -> np.random.SeedSequence:
    if isinstance(seed, np.random.SeedSequence):
        return seed
    return np.random.SeedSequence(seed)


def _chunks(reps: int, n_jobs: int) -> List[range]:
    n_chunks = max(1, min(reps, n_jobs))
    edges = np.linspace(0, reps, n_chunks + 1).astype(int)
    return [range(int(lo), int(hi)) for lo, hi in zip(edges[:-1], edges[1:]) if hi > lo]


def replicate_maxima(
    blocks: WindowBlocks,
    n_lagged: int,
    bandwidth: int,
    family: KernelFamily,
    boot_dep: float,
    method: BootMethod,
    seeds: Sequence[np.random.SeedSequence],
) -> np.ndarray:
    """Bootstrap maxima for one chunk of replicates, one per entry of ``seeds``."""
    W = np.stack([multipliers(n_lagged, boot_dep, np.random.default_rng(s)) for s in seeds])
    c = sign_vector(bandwidth)
    factor = statistic_scale(bandwidth, family)
    size = 2 * bandwidth
    maxima = np.full(len(seeds), -np.inf)

    for k in range(bandwidth, n_lagged - bandwidth):
        start = k - bandwidth
        K = blocks.block(start)
        V = W[:, start:start + size] * c
        if method is BootMethod.mean_subtract:
            V = V - V.mean(axis=1, keepdims=True)
        values = factor * np.einsum("ri,ri->r", V @ K, V)
        np.maximum(maxima, values, out=maxima)

    return maxima


def calibrate(
    blocks: WindowBlocks,
    n_lagged: int,
    bandwidth: int,
    family: KernelFamily,
    alpha: float | None = None,
    reps: int | None = None,
    boot_dep: float = 1.0,
    method: Union[BootMethod, str, None] = None,
    seed: SeedLike = None,
    n_jobs: int | None = None,
) -> float:
    if alpha is None:
        alpha = settings.alpha
    if reps is None:
        reps = settings.bootstrap_reps
    if method is None:
        method = settings.bootstrap_method
    if n_jobs is None:
        n_jobs = settings.bootstrap_n_jobs
    _check(alpha, reps, boot_dep)
    method = BootMethod.parse(method)
    reps = int(reps)

    children = _seed_sequence(seed).spawn(reps)
    chunks = _chunks(reps, max(1, int(n_jobs)))
    log.debug("calibrate: G=%d reps=%d chunks=%d method=%s", bandwidth, reps, len(chunks), method.value)

    results = Parallel(n_jobs=len(chunks), prefer="threads")(
        delayed(replicate_maxima)(
            blocks, n_lagged, bandwidth, family, boot_dep, method, [children[r] for r in chunk]
        )
        for chunk in chunks
    )

    maxima = np.empty(reps)
    for chunk, chunk_maxima in zip(chunks, results):
        maxima[chunk.start:chunk.stop] = chunk_maxima

    threshold = max(0.0, float(np.quantile(maxima, 1.0 - alpha)))
    log.debug("calibrate: G=%d alpha=%.3f threshold=%.6g", bandwidth, alpha, threshold)
    return threshold

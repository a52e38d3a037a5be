"""
Entry points of the NP-MOJO change point detector: single lag, multiple lags at one bandwidth, and multiple bandwidths.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from npmojo.bootstrap.calibrate import SeedLike, calibrate
from npmojo.changepoint.extraction import extract
from npmojo.enums import ThresholdMode
from npmojo.kernel.functions import WindowBlocks, kernel_band
from npmojo.kernel.heuristic import resolve_scale
from npmojo.merge.multilag import merge_multilag
from npmojo.merge.multiscale import merge_multiscale
from npmojo.options import CriterionConfig, KernelConfig, MergeConfig, ThresholdConfig
from npmojo.results import MultiLagResult, MultiscaleResult, SingleLagResult
from npmojo.statistic.embedding import lag_embed
from npmojo.statistic.mosum import mosum_statistic
from npmojo import validation

log = logging.getLogger(__name__)


def _run_unit(
    x: np.ndarray,
    bandwidth: int,
    lag: int,
    kernel: KernelConfig,
    threshold: ThresholdConfig,
    criterion: CriterionConfig,
    manual_value: Optional[float],
    seed: SeedLike,
) -> SingleLagResult:
    lagged = lag_embed(x, lag)
    scale = resolve_scale(lagged, kernel.family, kernel.scale, kernel.data_driven, kernel.use_mean)
    size = 2 * bandwidth
    blocks = WindowBlocks(kernel_band(lagged, size, kernel.family, scale), size)
    stat = mosum_statistic(lagged, bandwidth, kernel.family, scale, lag=lag, blocks=blocks)

    if threshold.mode is ThresholdMode.manual:
        thresh = float(manual_value)
    else:
        thresh = calibrate(
            blocks,
            lagged.shape[0],
            bandwidth,
            kernel.family,
            alpha=threshold.alpha,
            reps=threshold.reps,
            boot_dep=threshold.boot_dep,
            method=threshold.method,
            seed=seed,
            n_jobs=threshold.n_jobs,
        )

    cpts = extract(stat, thresh, criterion.criterion, criterion.eta, criterion.epsilon)
    log.info(
        "np.mojo G=%d lag=%d scale=%.4g threshold=%.6g (%s) cpts=%d",
        bandwidth, lag, scale, thresh, threshold.mode.value, len(cpts),
    )
    return SingleLagResult(
        bandwidth=bandwidth,
        lag=lag,
        kernel=replace(kernel, scale=scale),
        threshold_config=threshold,
        criterion=criterion,
        threshold=thresh,
        statistic=stat,
        cpts=tuple(cpts),
    )


def _options(
    x: np.ndarray,
    kernel: Optional[KernelConfig],
    threshold: Optional[ThresholdConfig],
    criterion: Optional[CriterionConfig],
):
    kernel = validation.check_kernel(kernel or KernelConfig())
    threshold = validation.check_threshold(threshold or ThresholdConfig(), x.shape[0])
    criterion = validation.check_criterion(criterion or CriterionConfig())
    return kernel, threshold, criterion


def _merge_lags(
    x: np.ndarray,
    bandwidth: int,
    lags: List[int],
    kernel: KernelConfig,
    threshold: ThresholdConfig,
    criterion: CriterionConfig,
    merge: MergeConfig,
    manual_values: List[Optional[float]],
    seed: np.random.SeedSequence,
) -> MultiLagResult:
    seeds = seed.spawn(len(lags))
    per_lag = [
        _run_unit(x, bandwidth, lag, kernel, threshold, criterion, value, lag_seed)
        for lag, value, lag_seed in zip(lags, manual_values, seeds)
    ]
    cpts, clusters = merge_multilag(
        [r.cpts for r in per_lag], bandwidth, merge.eta_merge, merge.merge_type
    )
    log.info("np.mojo.multilag G=%d lags=%s cpts=%d", bandwidth, lags, len(cpts))
    return MultiLagResult(
        bandwidth=bandwidth,
        lags=tuple(lags),
        kernel=kernel,
        threshold_config=threshold,
        criterion=criterion,
        merge=merge,
        thresholds=tuple(r.threshold for r in per_lag),
        per_lag=tuple(per_lag),
        cpts=tuple(cpts),
        clusters=tuple(clusters),
    )


def detect_single(
    series: Any,
    bandwidth: int,
    lag: int = 0,
    kernel: Optional[KernelConfig] = None,
    threshold: Optional[ThresholdConfig] = None,
    criterion: Optional[CriterionConfig] = None,
) -> SingleLagResult:
    """Detect change points from the statistic of one lag at one bandwidth."""
    x = validation.as_series(series)
    lag = validation.check_lag(lag)
    bandwidth = validation.check_bandwidth(bandwidth, x.shape[0], [lag])
    kernel, threshold, criterion = _options(x, kernel, threshold, criterion)
    manual_value = validation.lag_thresholds(threshold, 1)[0]

    return _run_unit(x, bandwidth, lag, kernel, threshold, criterion, manual_value, threshold.seed)


def detect_multilag(
    series: Any,
    bandwidth: int,
    lags: Union[int, Sequence[int]] = (0, 1),
    kernel: Optional[KernelConfig] = None,
    threshold: Optional[ThresholdConfig] = None,
    criterion: Optional[CriterionConfig] = None,
    merge: Optional[MergeConfig] = None,
) -> MultiLagResult:
    """Detect change points at every lag in ``lags`` and merge them into clusters."""
    x = validation.as_series(series)
    lags = validation.check_lags(lags)
    bandwidth = validation.check_bandwidth(bandwidth, x.shape[0], lags)
    kernel, threshold, criterion = _options(x, kernel, threshold, criterion)
    merge = validation.check_merge(merge or MergeConfig())
    manual_values = validation.lag_thresholds(threshold, len(lags))

    return _merge_lags(
        x, bandwidth, lags, kernel, threshold, criterion, merge, manual_values,
        np.random.SeedSequence(threshold.seed),
    )


def detect_multiscale(
    series: Any,
    bandwidths: Union[int, Sequence[int]],
    lags: Union[int, Sequence[int]] = (0, 1),
    kernel: Optional[KernelConfig] = None,
    threshold: Optional[ThresholdConfig] = None,
    criterion: Optional[CriterionConfig] = None,
    merge: Optional[MergeConfig] = None,
    eta_bottom_up: Optional[float] = None,
) -> MultiscaleResult:
    """Run the multi-lag detector at every bandwidth and merge the results bottom-up."""
    from config import settings

    x = validation.as_series(series)
    lags = validation.check_lags(lags)
    bandwidths = validation.check_bandwidths(bandwidths, x.shape[0], lags)
    kernel, threshold, criterion = _options(x, kernel, threshold, criterion)
    merge = validation.check_merge(merge or MergeConfig())
    eta_bottom_up = validation.check_eta_bottom_up(
        settings.eta_bottom_up if eta_bottom_up is None else eta_bottom_up
    )
    manual_values = validation.scale_thresholds(threshold, len(bandwidths), len(lags))

    seeds = np.random.SeedSequence(threshold.seed).spawn(len(bandwidths))
    per_bandwidth = [
        _merge_lags(x, G, lags, kernel, threshold, criterion, merge, values, seed)
        for G, values, seed in zip(bandwidths, manual_values, seeds)
    ]
    cpts = merge_multiscale([r.cpts for r in per_bandwidth], eta_bottom_up)
    log.info("multiscale.np.mojo G=%s lags=%s cpts=%d", bandwidths, lags, len(cpts))

    return MultiscaleResult(
        bandwidths=tuple(bandwidths),
        lags=tuple(lags),
        kernel=kernel,
        threshold_config=threshold,
        criterion=criterion,
        merge=merge,
        eta_bottom_up=eta_bottom_up,
        per_bandwidth=tuple(per_bandwidth),
        cpts=tuple(cpts),
    )

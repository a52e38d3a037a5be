"""
Eager validation of detector inputs.

Every entry point calls into this module before any kernel is evaluated, so a
bad bandwidth, lag or option fails fast with a single descriptive error and no
partial result. Manual thresholds are broadcast here to one value per
(bandwidth, lag) unit.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import numbers
from dataclasses import replace
from typing import Any, List, Optional, Sequence

import numpy as np

from npmojo.bootstrap.multipliers import default_boot_dep
from npmojo.enums import ThresholdMode
from npmojo.exceptions import (
    DimensionMismatchError,
    InvalidBandwidthError,
    InvalidLagError,
    InvalidParameterError,
)
from npmojo.options import CriterionConfig, KernelConfig, MergeConfig, ThresholdConfig


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integral(value: Any) -> bool:
    return _is_real(value) and math.isfinite(value) and float(value).is_integer()


def as_series(series: Any) -> np.ndarray:
    try:
        x = np.asarray(series, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"Series must be numeric: {exc}") from exc
    if x.ndim == 1:
        x = x[:, None]
    if x.ndim != 2 or x.shape[0] == 0 or x.shape[1] == 0:
        raise InvalidParameterError(
            f"Series must be a non-empty 1-D or 2-D array, got shape {x.shape}."
        )
    if not np.all(np.isfinite(x)):
        raise InvalidParameterError("Series contains non-finite values.")
    return x


def check_lag(lag: Any) -> int:
    if not _is_integral(lag) or lag < 0:
        raise InvalidLagError(f"Lag must be a nonnegative integer, got {lag!r}.")
    return int(lag)


def check_lags(lags: Any) -> List[int]:
    if _is_real(lags):
        lags = [lags]
    try:
        checked = [check_lag(lag) for lag in lags]
    except TypeError:
        raise InvalidLagError(f"Lags must be a sequence of nonnegative integers, got {lags!r}.") from None
    if not checked:
        raise InvalidLagError("At least one lag is required.")
    return checked


def check_bandwidth(bandwidth: Any, n: int, lags: Sequence[int]) -> int:
    if not _is_integral(bandwidth) or bandwidth < 1:
        raise InvalidBandwidthError(f"Bandwidth must be a positive integer, got {bandwidth!r}.")
    G = int(bandwidth)
    worst = max(lags)
    if 2 * G >= n - worst:
        raise InvalidBandwidthError(
            f"Bandwidth G={G} is too large for a series of length {n} at lag {worst}: "
            f"2G must be smaller than n - lag = {n - worst}."
        )
    return G


def check_bandwidths(bandwidths: Any, n: int, lags: Sequence[int]) -> List[int]:
    if _is_real(bandwidths):
        bandwidths = [bandwidths]
    checked = [check_bandwidth(G, n, lags) for G in bandwidths]
    if not checked:
        raise InvalidBandwidthError("At least one bandwidth is required.")
    return checked


def _positive(name: str, value: Any) -> None:
    if not _is_real(value) or not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be a positive number, got {value!r}.")


def check_kernel(kernel: KernelConfig) -> KernelConfig:
    _positive("Kernel scale", kernel.scale)
    return kernel


def check_threshold(threshold: ThresholdConfig, n: int) -> ThresholdConfig:
    """Validate bootstrap options and fill in the default ``boot_dep`` for a series of length ``n``."""
    if not _is_real(threshold.alpha) or not 0.0 <= threshold.alpha <= 1.0:
        raise InvalidParameterError(f"alpha must lie in [0, 1], got {threshold.alpha!r}.")
    if not _is_integral(threshold.reps) or threshold.reps <= 0:
        raise InvalidParameterError(f"reps must be a positive integer, got {threshold.reps!r}.")
    if not _is_integral(threshold.n_jobs) or threshold.n_jobs < 1:
        raise InvalidParameterError(f"n_jobs must be a positive integer, got {threshold.n_jobs!r}.")
    boot_dep = threshold.boot_dep if threshold.boot_dep is not None else default_boot_dep(n)
    _positive("boot.dep", boot_dep)
    if threshold.mode is ThresholdMode.manual and threshold.value is None:
        raise InvalidParameterError("threshold='manual' requires a threshold value.")
    return replace(threshold, boot_dep=float(boot_dep))


def check_criterion(criterion: CriterionConfig) -> CriterionConfig:
    _positive("eta", criterion.eta)
    if not _is_real(criterion.epsilon) or not 0.0 < criterion.epsilon <= 1.0:
        raise InvalidParameterError(f"epsilon must lie in (0, 1], got {criterion.epsilon!r}.")
    return criterion


def check_merge(merge: MergeConfig) -> MergeConfig:
    _positive("eta.merge", merge.eta_merge)
    return merge


def check_eta_bottom_up(eta_bottom_up: Any) -> float:
    _positive("eta.bottom.up", eta_bottom_up)
    return float(eta_bottom_up)


def _as_list(value: Any) -> List[Any]:
    try:
        return list(value)
    except TypeError:
        raise InvalidParameterError(f"Manual threshold must be a number or a sequence, got {value!r}.") from None


def manual_threshold(value: Any) -> float:
    if not _is_real(value) or not math.isfinite(value) or value < 0:
        raise InvalidParameterError(f"Manual threshold must be a nonnegative number, got {value!r}.")
    return float(value)


def lag_thresholds(threshold: ThresholdConfig, n_lags: int, value: Any = None) -> List[Optional[float]]:
    """One manual threshold per lag, or ``None`` per lag in bootstrap mode."""
    if threshold.mode is ThresholdMode.bootstrap:
        return [None] * n_lags
    if value is None:
        value = threshold.value
    if _is_real(value):
        return [manual_threshold(value)] * n_lags
    values = _as_list(value)
    if len(values) == 1:
        return [manual_threshold(values[0])] * n_lags
    if len(values) != n_lags:
        raise DimensionMismatchError(
            f"Manual threshold has {len(values)} values but {n_lags} lags were requested."
        )
    return [manual_threshold(v) for v in values]


def scale_thresholds(threshold: ThresholdConfig, n_bandwidths: int, n_lags: int) -> List[List[Optional[float]]]:
    """One list of per-lag thresholds per bandwidth."""
    if threshold.mode is ThresholdMode.bootstrap or _is_real(threshold.value):
        return [lag_thresholds(threshold, n_lags) for _ in range(n_bandwidths)]
    entries = _as_list(threshold.value)
    if len(entries) != n_bandwidths:
        raise DimensionMismatchError(
            f"Manual threshold has {len(entries)} entries but {n_bandwidths} bandwidths were requested."
        )
    return [lag_thresholds(threshold, n_lags, value=entry) for entry in entries]

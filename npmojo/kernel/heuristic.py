"""
Median heuristic for the kernel scale parameter, computed once per bandwidth/lag unit from the lagged series before any statistic is evaluated.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math

import numpy as np
from scipy.spatial.distance import pdist

from config import settings
from npmojo.enums import KernelFamily

log = logging.getLogger(__name__)


def median_distance(lagged: np.ndarray, use_mean: bool = False, max_points: int | None = None) -> float:
    if max_points is None:
        max_points = settings.kernel_heuristic_max_points
    m = lagged.shape[0]
    if m < 2:
        return 0.0
    if m > max_points:
        idx = np.unique(np.linspace(0, m - 1, max_points).astype(int))
        lagged = lagged[idx]
    dists = pdist(lagged, metric="euclidean")
    return float(np.mean(dists) if use_mean else np.median(dists))


def resolve_scale(
    lagged: np.ndarray,
    family: KernelFamily,
    scale: float,
    data_driven: bool,
    use_mean: bool = False,
) -> float:
    """Return the kernel scale to use for one unit of work.

    With ``data_driven`` the median (or mean) pairwise distance ``m`` replaces
    the configured scale: gauss and laplace take ``1 / m`` since their scale
    multiplies the distance, quad.exp and sine take ``m`` directly. The
    euclidean exponent is never data driven.
    """
    if not data_driven or family is KernelFamily.euclidean:
        return float(scale)

    m = median_distance(lagged, use_mean=use_mean)
    if not math.isfinite(m) or m <= 0.0:
        log.warning(
            "resolve_scale: %s pairwise distance is %r; keeping configured scale %.4g",
            "mean" if use_mean else "median", m, scale,
        )
        return float(scale)

    if family in (KernelFamily.gauss, KernelFamily.laplace):
        resolved = 1.0 / m
    else:
        resolved = m
    log.debug("resolve_scale: family=%s distance=%.6g scale=%.6g", family.value, m, resolved)
    return resolved

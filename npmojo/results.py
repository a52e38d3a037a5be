"""
Result records returned by the NP-MOJO entry points. Each carries the configuration it was produced with so a run can be reproduced.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from npmojo.changepoint.extraction import CandidatePoint
from npmojo.merge.multilag import CandidateCluster
from npmojo.options import CriterionConfig, KernelConfig, MergeConfig, ThresholdConfig
from npmojo.statistic.mosum import StatisticSeries


@dataclass(frozen=True)
class SingleLagResult:
    bandwidth: int
    lag: int
    # scale is the value actually used, after the median heuristic
    kernel: KernelConfig
    threshold_config: ThresholdConfig
    criterion: CriterionConfig
    threshold: float
    statistic: StatisticSeries
    cpts: Tuple[CandidatePoint, ...]


@dataclass(frozen=True)
class MultiLagResult:
    bandwidth: int
    lags: Tuple[int, ...]
    kernel: KernelConfig
    threshold_config: ThresholdConfig
    criterion: CriterionConfig
    merge: MergeConfig
    thresholds: Tuple[float, ...]
    per_lag: Tuple[SingleLagResult, ...]
    cpts: Tuple[CandidatePoint, ...]
    clusters: Tuple[CandidateCluster, ...]


@dataclass(frozen=True)
class MultiscaleResult:
    bandwidths: Tuple[int, ...]
    lags: Tuple[int, ...]
    kernel: KernelConfig
    threshold_config: ThresholdConfig
    criterion: CriterionConfig
    merge: MergeConfig
    eta_bottom_up: float
    per_bandwidth: Tuple[MultiLagResult, ...]
    cpts: Tuple[CandidatePoint, ...]

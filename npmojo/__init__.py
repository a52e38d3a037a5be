"""
NP-MOJO: nonparametric multiple change point detection in multivariate time series via joint characteristic functions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from npmojo.changepoint import CandidatePoint
from npmojo.detector import detect_multilag, detect_multiscale, detect_single
from npmojo.enums import BootMethod, Criterion, KernelFamily, MergeType, ThresholdMode
from npmojo.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidBandwidthError,
    InvalidLagError,
    InvalidParameterError,
    NpMojoError,
)
from npmojo.merge import CandidateCluster
from npmojo.options import CriterionConfig, KernelConfig, MergeConfig, ThresholdConfig
from npmojo.results import MultiLagResult, MultiscaleResult, SingleLagResult
from npmojo.statistic import StatisticSeries

__all__ = [
    "BootMethod",
    "CandidateCluster",
    "CandidatePoint",
    "ConfigurationError",
    "Criterion",
    "CriterionConfig",
    "DimensionMismatchError",
    "InvalidBandwidthError",
    "InvalidLagError",
    "InvalidParameterError",
    "KernelConfig",
    "KernelFamily",
    "MergeConfig",
    "MergeType",
    "MultiLagResult",
    "MultiscaleResult",
    "NpMojoError",
    "SingleLagResult",
    "StatisticSeries",
    "ThresholdConfig",
    "ThresholdMode",
    "detect_multilag",
    "detect_multiscale",
    "detect_single",
]

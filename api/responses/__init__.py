"""
Response models for API endpoints, built from the detector result records.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, model_serializer

from npmojo.changepoint import CandidatePoint
from npmojo.merge import CandidateCluster
from npmojo.options import CriterionConfig, KernelConfig, ThresholdConfig
from npmojo.results import MultiLagResult, MultiscaleResult, SingleLagResult


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class CandidatePointModel(NpModel):

    location: int
    lag: int
    score: float
    bandwidth: int

    @classmethod
    def from_point(cls, point: CandidatePoint) -> CandidatePointModel:
        return cls(**dataclasses.asdict(point))


class ClusterModel(NpModel):

    representative: CandidatePointModel
    members: List[CandidatePointModel]

    @classmethod
    def from_cluster(cls, cluster: CandidateCluster) -> ClusterModel:
        return cls(
            representative=CandidatePointModel.from_point(cluster.representative),
            members=[CandidatePointModel.from_point(p) for p in cluster.members],
        )


class DetectorSettings(NpModel):

    kernel_family: str
    kernel_scale: float
    kernel_data_driven: bool
    kernel_use_mean: bool
    threshold_mode: str
    alpha: float
    reps: int
    boot_dep: Optional[float]
    boot_method: str
    n_jobs: int
    criterion: str
    eta: float
    epsilon: float

    @classmethod
    def from_configs(
        cls, kernel: KernelConfig, threshold: ThresholdConfig, criterion: CriterionConfig
    ) -> DetectorSettings:
        return cls(
            kernel_family=kernel.family.value,
            kernel_scale=kernel.scale,
            kernel_data_driven=kernel.data_driven,
            kernel_use_mean=kernel.use_mean,
            threshold_mode=threshold.mode.value,
            alpha=threshold.alpha,
            reps=threshold.reps,
            boot_dep=threshold.boot_dep,
            boot_method=threshold.method.value,
            n_jobs=threshold.n_jobs,
            criterion=criterion.criterion.value,
            eta=criterion.eta,
            epsilon=criterion.epsilon,
        )


class SingleLagResponse(NpModel):

    bandwidth: int
    lag: int
    settings: DetectorSettings
    threshold: float
    statistic_start: int
    statistic: List[float]
    cpts: List[CandidatePointModel]

    @classmethod
    def from_result(cls, result: SingleLagResult) -> SingleLagResponse:
        stat = result.statistic
        return cls(
            bandwidth=result.bandwidth,
            lag=result.lag,
            settings=DetectorSettings.from_configs(result.kernel, result.threshold_config, result.criterion),
            threshold=result.threshold,
            statistic_start=int(stat.locations[0]) if len(stat) else result.bandwidth,
            statistic=stat.values.tolist(),
            cpts=[CandidatePointModel.from_point(p) for p in result.cpts],
        )


class MultiLagResponse(NpModel):

    bandwidth: int
    lags: List[int]
    settings: DetectorSettings
    kernel_scales: List[float]
    merge_type: str
    eta_merge: float
    thresholds: List[float]
    cpts: List[CandidatePointModel]
    cpt_clusters: List[ClusterModel]

    @classmethod
    def from_result(cls, result: MultiLagResult) -> MultiLagResponse:
        return cls(
            bandwidth=result.bandwidth,
            lags=list(result.lags),
            settings=DetectorSettings.from_configs(result.kernel, result.threshold_config, result.criterion),
            kernel_scales=[r.kernel.scale for r in result.per_lag],
            merge_type=result.merge.merge_type.value,
            eta_merge=result.merge.eta_merge,
            thresholds=list(result.thresholds),
            cpts=[CandidatePointModel.from_point(p) for p in result.cpts],
            cpt_clusters=[ClusterModel.from_cluster(c) for c in result.clusters],
        )


class MultiscaleResponse(NpModel):

    bandwidths: List[int]
    lags: List[int]
    settings: DetectorSettings
    merge_type: str
    eta_merge: float
    eta_bottom_up: float
    thresholds: List[List[float]]
    cpts: List[CandidatePointModel]

    @classmethod
    def from_result(cls, result: MultiscaleResult) -> MultiscaleResponse:
        return cls(
            bandwidths=list(result.bandwidths),
            lags=list(result.lags),
            settings=DetectorSettings.from_configs(result.kernel, result.threshold_config, result.criterion),
            merge_type=result.merge.merge_type.value,
            eta_merge=result.merge.eta_merge,
            eta_bottom_up=result.eta_bottom_up,
            thresholds=[list(r.thresholds) for r in result.per_bandwidth],
            cpts=[CandidatePointModel.from_point(p) for p in result.cpts],
        )

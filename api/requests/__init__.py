"""
Request models for the change point endpoints. Unset options fall back to the service settings.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

SeriesPayload = Union[List[float], List[List[float]]]
ThresholdPayload = Union[float, List[Union[float, List[float]]]]


class KernelOptions(BaseModel):
    family: Optional[str] = None
    scale: Optional[float] = Field(default=None, gt=0.0)
    data_driven: Optional[bool] = None
    use_mean: Optional[bool] = None


class ThresholdOptions(BaseModel):
    mode: Optional[str] = None
    value: Optional[ThresholdPayload] = None
    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    reps: Optional[int] = Field(default=None, ge=1, le=5000)
    boot_dep: Optional[float] = Field(default=None, gt=0.0)
    method: Optional[str] = None
    n_jobs: Optional[int] = Field(default=None, ge=1, le=64)
    seed: Optional[int] = None


class CriterionOptions(BaseModel):
    criterion: Optional[str] = None
    eta: Optional[float] = Field(default=None, gt=0.0)
    epsilon: Optional[float] = Field(default=None, gt=0.0, le=1.0)


class MergeOptions(BaseModel):
    merge_type: Optional[str] = None
    eta_merge: Optional[float] = Field(default=None, gt=0.0)


class SingleLagRequest(BaseModel):
    series: SeriesPayload
    bandwidth: int = Field(ge=1)
    lag: int = 0
    kernel: KernelOptions = Field(default_factory=KernelOptions)
    threshold: ThresholdOptions = Field(default_factory=ThresholdOptions)
    criterion: CriterionOptions = Field(default_factory=CriterionOptions)


class MultiLagRequest(BaseModel):
    series: SeriesPayload
    bandwidth: int = Field(ge=1)
    lags: List[int] = Field(default_factory=lambda: [0, 1])
    kernel: KernelOptions = Field(default_factory=KernelOptions)
    threshold: ThresholdOptions = Field(default_factory=ThresholdOptions)
    criterion: CriterionOptions = Field(default_factory=CriterionOptions)
    merge: MergeOptions = Field(default_factory=MergeOptions)


class MultiscaleRequest(BaseModel):
    series: SeriesPayload
    bandwidths: List[int]
    lags: List[int] = Field(default_factory=lambda: [0, 1])
    kernel: KernelOptions = Field(default_factory=KernelOptions)
    threshold: ThresholdOptions = Field(default_factory=ThresholdOptions)
    criterion: CriterionOptions = Field(default_factory=CriterionOptions)
    merge: MergeOptions = Field(default_factory=MergeOptions)
    eta_bottom_up: Optional[float] = Field(default=None, gt=0.0)

"""
Change point detection routes: single lag, multiple lags and multiple bandwidths.

Detection is CPU bound and runs in a worker thread so the event loop stays
responsive while the bootstrap is calibrating.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
from typing import Tuple

from fastapi import APIRouter

from api.requests import (
    CriterionOptions,
    KernelOptions,
    MergeOptions,
    MultiLagRequest,
    MultiscaleRequest,
    SingleLagRequest,
    ThresholdOptions,
)
from api.responses import MultiLagResponse, MultiscaleResponse, SingleLagResponse
from api.routes.exception import handle_exceptions
from npmojo.detector import detect_multilag, detect_multiscale, detect_single
from npmojo.options import CriterionConfig, KernelConfig, MergeConfig, ThresholdConfig

router = APIRouter(prefix="/changepoints", tags=["Change points"])


def _configs(
    kernel: KernelOptions, threshold: ThresholdOptions, criterion: CriterionOptions
) -> Tuple[KernelConfig, ThresholdConfig, CriterionConfig]:
    return (
        KernelConfig(**kernel.model_dump(exclude_none=True)),
        ThresholdConfig(**threshold.model_dump(exclude_none=True)),
        CriterionConfig(**criterion.model_dump(exclude_none=True)),
    )


def _merge(merge: MergeOptions) -> MergeConfig:
    return MergeConfig(**merge.model_dump(exclude_none=True))


@router.post("/single", response_model=SingleLagResponse, summary="Single-lag change point detection")
@handle_exceptions
async def single(req: SingleLagRequest) -> SingleLagResponse:
    kernel, threshold, criterion = _configs(req.kernel, req.threshold, req.criterion)
    result = await asyncio.to_thread(
        detect_single, req.series, req.bandwidth, req.lag, kernel, threshold, criterion
    )
    return SingleLagResponse.from_result(result)


@router.post("/multilag", response_model=MultiLagResponse, summary="Multi-lag change point detection")
@handle_exceptions
async def multilag(req: MultiLagRequest) -> MultiLagResponse:
    kernel, threshold, criterion = _configs(req.kernel, req.threshold, req.criterion)
    result = await asyncio.to_thread(
        detect_multilag, req.series, req.bandwidth, req.lags,
        kernel, threshold, criterion, _merge(req.merge),
    )
    return MultiLagResponse.from_result(result)


@router.post("/multiscale", response_model=MultiscaleResponse, summary="Multiscale change point detection")
@handle_exceptions
async def multiscale(req: MultiscaleRequest) -> MultiscaleResponse:
    kernel, threshold, criterion = _configs(req.kernel, req.threshold, req.criterion)
    result = await asyncio.to_thread(
        detect_multiscale, req.series, req.bandwidths, req.lags,
        kernel, threshold, criterion, _merge(req.merge), req.eta_bottom_up,
    )
    return MultiscaleResponse.from_result(result)

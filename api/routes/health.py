"""
Health check route reporting service status and the active detector defaults.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from config import (
    BOOT_METHODS,
    CRITERIA,
    HEALTH_PATH,
    KERNEL_FAMILIES,
    MERGE_TYPES,
    THRESHOLD_MODES,
    settings,
)
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Health"])


@router.get(HEALTH_PATH)
@handle_exceptions
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "defaults": {
            "kernel_family": settings.kernel_family,
            "threshold_mode": settings.threshold_mode,
            "alpha": settings.alpha,
            "bootstrap_reps": settings.bootstrap_reps,
            "criterion": settings.criterion,
            "merge_type": settings.merge_type,
        },
        "options": {
            "kernel_family": KERNEL_FAMILIES,
            "threshold_mode": THRESHOLD_MODES,
            "bootstrap_method": BOOT_METHODS,
            "criterion": CRITERIA,
            "merge_type": MERGE_TYPES,
        },
    }

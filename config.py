"""
Constants and configuration for the NP-MOJO change point service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Optional

from pydantic_settings import BaseSettings


NPMOJO_LOG_LEVEL: str = os.getenv("NPMOJO_LOG_LEVEL", "INFO").upper()
NPMOJO_API_HOST: str = os.getenv("NPMOJO_API_HOST", "0.0.0.0")
NPMOJO_API_PORT: int = int(os.getenv("NPMOJO_API_PORT", "4323"))

KERNEL_FAMILIES: List[str] = ["quad.exp", "gauss", "euclidean", "laplace", "sine"]
THRESHOLD_MODES: List[str] = ["bootstrap", "manual"]
BOOT_METHODS: List[str] = ["mean.subtract", "no.mean.subtract"]
CRITERIA: List[str] = ["eta", "epsilon", "eta.and.epsilon"]
MERGE_TYPES: List[str] = ["sequential", "bottom-up"]

HEALTH_PATH = "/health"


class Settings(BaseSettings):
    log_level: str = NPMOJO_LOG_LEVEL
    api_host: str = NPMOJO_API_HOST
    api_port: int = NPMOJO_API_PORT

    # kernel defaults
    kernel_family: str = "quad.exp"
    kernel_scale: float = 1.0
    kernel_data_driven: bool = True
    kernel_use_mean: bool = False
    # points used by the median heuristic; larger series are thinned evenly
    kernel_heuristic_max_points: int = 1000

    # threshold / multiplier bootstrap
    threshold_mode: str = "bootstrap"
    alpha: float = 0.1
    bootstrap_reps: int = 200
    # boot.dep = factor * n ** exponent unless given explicitly
    bootstrap_dep_factor: float = 1.5
    bootstrap_dep_exponent: float = 1.0 / 3.0
    bootstrap_method: str = "mean.subtract"
    bootstrap_n_jobs: int = 1
    bootstrap_seed: Optional[int] = None

    # exceedance criterion
    criterion: str = "eta.and.epsilon"
    eta: float = 0.4
    epsilon: float = 0.02

    # merging across lags and bandwidths
    merge_type: str = "sequential"
    eta_merge: float = 1.0
    eta_bottom_up: float = 0.8

    model_config = {
        "env_prefix": "NPMOJO_",
        "extra": "ignore",
    }


settings = Settings()

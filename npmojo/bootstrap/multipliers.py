"""
Dependent multiplier sequences for the multiplier bootstrap: a moving average of Gaussian noise whose window length sets the dependence strength.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math

import numpy as np

from config import settings
from npmojo.exceptions import InvalidParameterError


def default_boot_dep(n: int) -> float:
    return settings.bootstrap_dep_factor * n ** settings.bootstrap_dep_exponent


def window_length(boot_dep: float) -> int:
    if not boot_dep > 0:
        raise InvalidParameterError(f"boot.dep must be positive, got {boot_dep!r}.")
    return max(1, int(math.ceil(boot_dep)))


def multipliers(length: int, boot_dep: float, rng: np.random.Generator) -> np.ndarray:
    """Unit-variance multipliers with correlation ``1 - |s - t| / b``, ``b = ceil(boot_dep)``."""
    b = window_length(boot_dep)
    noise = rng.standard_normal(length + b - 1)
    if b == 1:
        return noise
    return np.convolve(noise, np.ones(b), mode="valid") / math.sqrt(b)

"""
Option records for the NP-MOJO detector. Defaults come from :mod:`config` and enumerated options are coerced on construction.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from config import settings
from npmojo.enums import BootMethod, Criterion, KernelFamily, MergeType, ThresholdMode

ThresholdValue = Union[float, Sequence[Union[float, Sequence[float]]]]


@dataclass(frozen=True)
class KernelConfig:
    family: KernelFamily = field(default_factory=lambda: settings.kernel_family)
    scale: float = field(default_factory=lambda: settings.kernel_scale)
    data_driven: bool = field(default_factory=lambda: settings.kernel_data_driven)
    use_mean: bool = field(default_factory=lambda: settings.kernel_use_mean)

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", KernelFamily.parse(self.family))


@dataclass(frozen=True)
class ThresholdConfig:
    mode: ThresholdMode = field(default_factory=lambda: settings.threshold_mode)
    value: Optional[ThresholdValue] = None
    alpha: float = field(default_factory=lambda: settings.alpha)
    reps: int = field(default_factory=lambda: settings.bootstrap_reps)
    # None means bootstrap_dep_factor * n ** bootstrap_dep_exponent
    boot_dep: Optional[float] = None
    method: BootMethod = field(default_factory=lambda: settings.bootstrap_method)
    n_jobs: int = field(default_factory=lambda: settings.bootstrap_n_jobs)
    seed: Optional[int] = field(default_factory=lambda: settings.bootstrap_seed)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", ThresholdMode.parse(self.mode))
        object.__setattr__(self, "method", BootMethod.parse(self.method))


@dataclass(frozen=True)
class CriterionConfig:
    criterion: Criterion = field(default_factory=lambda: settings.criterion)
    eta: float = field(default_factory=lambda: settings.eta)
    epsilon: float = field(default_factory=lambda: settings.epsilon)

    def __post_init__(self) -> None:
        object.__setattr__(self, "criterion", Criterion.parse(self.criterion))


@dataclass(frozen=True)
class MergeConfig:
    merge_type: MergeType = field(default_factory=lambda: settings.merge_type)
    eta_merge: float = field(default_factory=lambda: settings.eta_merge)

    def __post_init__(self) -> None:
        object.__setattr__(self, "merge_type", MergeType.parse(self.merge_type))

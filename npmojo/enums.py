"""
Enumerations for kernel families, threshold modes, bootstrap methods, exceedance criteria and merge strategies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

from npmojo.exceptions import ConfigurationError

E = TypeVar("E", bound="_Option")


class _Option(str, Enum):

    @classmethod
    def parse(cls: Type[E], value: Union[str, E]) -> E:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(repr(m.value) for m in cls)
            raise ConfigurationError(
                f"Unknown {cls.label()} {value!r}; expected one of {choices}."
            ) from None

    @classmethod
    def label(cls) -> str:
        return cls.__name__


class KernelFamily(_Option):
    quad_exp = "quad.exp"
    gauss = "gauss"
    euclidean = "euclidean"
    laplace = "laplace"
    sine = "sine"

    @classmethod
    def label(cls) -> str:
        return "kernel family"

    @property
    def is_product(self) -> bool:
        return self in (KernelFamily.quad_exp, KernelFamily.laplace, KernelFamily.sine)

    @property
    def sign(self) -> float:
        # the euclidean kernel is conditionally negative definite
        return -1.0 if self is KernelFamily.euclidean else 1.0


class ThresholdMode(_Option):
    bootstrap = "bootstrap"
    manual = "manual"

    @classmethod
    def label(cls) -> str:
        return "threshold mode"


class BootMethod(_Option):
    mean_subtract = "mean.subtract"
    no_mean_subtract = "no.mean.subtract"

    @classmethod
    def label(cls) -> str:
        return "bootstrap method"


class Criterion(_Option):
    eta = "eta"
    epsilon = "epsilon"
    eta_and_epsilon = "eta.and.epsilon"

    @classmethod
    def label(cls) -> str:
        return "criterion"

    @property
    def uses_eta(self) -> bool:
        return self in (Criterion.eta, Criterion.eta_and_epsilon)

    @property
    def uses_epsilon(self) -> bool:
        return self in (Criterion.epsilon, Criterion.eta_and_epsilon)


class MergeType(_Option):
    sequential = "sequential"
    bottom_up = "bottom-up"

    @classmethod
    def label(cls) -> str:
        return "change point merging type"

"""
Test cases for the option enums, validating parsing, error messages and derived properties.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from npmojo.enums import BootMethod, Criterion, KernelFamily, MergeType, ThresholdMode
from npmojo.exceptions import ConfigurationError, NpMojoError


def test_parse_accepts_values_and_members():
    assert KernelFamily.parse("quad.exp") is KernelFamily.quad_exp
    assert KernelFamily.parse(KernelFamily.sine) is KernelFamily.sine
    assert MergeType.parse("bottom-up") is MergeType.bottom_up
    assert BootMethod.parse("no.mean.subtract") is BootMethod.no_mean_subtract
    assert ThresholdMode.parse("manual") is ThresholdMode.manual


def test_parse_rejects_unknown_values_with_the_choices():
    with pytest.raises(ConfigurationError, match="'sequential', 'bottom-up'"):
        MergeType.parse("top-down")
    with pytest.raises(NpMojoError):
        ThresholdMode.parse("auto")
    with pytest.raises(ValueError):
        Criterion.parse("eta.or.epsilon")


def test_kernel_family_properties():
    assert KernelFamily.euclidean.sign == -1.0
    assert all(f.sign == 1.0 for f in KernelFamily if f is not KernelFamily.euclidean)
    assert KernelFamily.quad_exp.is_product and not KernelFamily.gauss.is_product


def test_criterion_flags():
    assert Criterion.eta.uses_eta and not Criterion.eta.uses_epsilon
    assert Criterion.epsilon.uses_epsilon and not Criterion.epsilon.uses_eta
    assert Criterion.eta_and_epsilon.uses_eta and Criterion.eta_and_epsilon.uses_epsilon

"""
Test cases for change point extraction, covering exceeding environments and the eta, epsilon and combined criteria.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from config import settings
from npmojo.changepoint import exceeding_environments, extract
from npmojo.exceptions import ConfigurationError
from npmojo.statistic import StatisticSeries

G = 10


def _stat(values, lag=0):
    values = np.asarray(values, dtype=float)
    return StatisticSeries(bandwidth=G, lag=lag, locations=np.arange(G, G + len(values)), values=values)


def _two_peaks():
    values = np.zeros(40)
    values[5:20] = [1, 2, 5, 2, 1, 1, 1, 1, 1, 2, 4, 2, 1, 1, 1]
    values[30] = 3.0
    return values


def test_exceeding_environments_are_maximal_strict_runs():
    values = np.array([0.0, 2.0, 3.0, 1.0, 5.0, 5.0, 0.0, 4.0])
    assert exceeding_environments(values, 1.0) == [(1, 3), (4, 6), (7, 8)]
    assert exceeding_environments(values, 5.0) == []


def test_eta_criterion_keeps_every_local_maximum():
    cpts = extract(_stat(_two_peaks(), lag=2), 0.5, "eta", eta=0.4)
    assert [p.location for p in cpts] == [G + 7, G + 15, G + 30]
    assert [p.score for p in cpts] == [5.0, 4.0, 3.0]
    assert all(p.lag == 2 and p.bandwidth == G for p in cpts)


def test_epsilon_criterion_keeps_one_maximum_per_long_environment():
    cpts = extract(_stat(_two_peaks()), 0.5, "epsilon", epsilon=0.5)
    assert [p.location for p in cpts] == [G + 7]


def test_combined_criterion_drops_short_environments():
    cpts = extract(_stat(_two_peaks()), 0.5, "eta.and.epsilon", eta=0.4, epsilon=0.5)
    assert [p.location for p in cpts] == [G + 7, G + 15]


def test_plateau_reports_its_first_point():
    values = np.zeros(20)
    values[3:6] = 2.0
    cpts = extract(_stat(values), 1.0, "eta", eta=0.4)
    assert [p.location for p in cpts] == [G + 3]


def test_nothing_above_threshold_gives_no_change_points():
    assert extract(_stat(_two_peaks()), 10.0, "eta") == []
    # exceedance is strict
    assert extract(_stat(_two_peaks()), 5.0, "eta") == []


def test_extract_uses_settings_defaults(monkeypatch):
    monkeypatch.setattr(settings, "criterion", "epsilon")
    monkeypatch.setattr(settings, "epsilon", 0.02)
    cpts = extract(_stat(_two_peaks()), 0.5)
    assert [p.location for p in cpts] == [G + 7, G + 30]


def test_unknown_criterion_is_rejected():
    with pytest.raises(ConfigurationError, match="criterion"):
        extract(_stat(_two_peaks()), 0.5, "delta")

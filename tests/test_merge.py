"""
Test cases for merging change points across lags (sequential and bottom-up) and across bandwidths.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import itertools

import pytest

from npmojo.changepoint import CandidatePoint
from npmojo.exceptions import ConfigurationError, InvalidParameterError
from npmojo.merge import (
    merge_bottom_up,
    merge_multilag,
    merge_multiscale,
    merge_sequential,
    pool_by_bandwidth,
)


def _p(location, score, lag=0, bandwidth=50):
    return CandidatePoint(location=location, lag=lag, score=score, bandwidth=bandwidth)


def _chain():
    return [_p(0, 1.0), _p(40, 2.0, lag=1), _p(80, 3.0), _p(120, 0.5, lag=1)]


def _assert_partition(clusters, candidates):
    members = [m for c in clusters for m in c.members]
    assert sorted(members, key=repr) == sorted(candidates, key=repr)
    for c in clusters:
        assert c.representative in c.members
        assert c.count == len(c.members)


def test_sequential_merge_groups_close_points_across_lags():
    per_lag = [[_p(100, 2.0), _p(300, 1.0)], [_p(105, 3.0, lag=1), _p(310, 0.5, lag=1), _p(500, 1.0, lag=1)]]
    reps, clusters = merge_multilag(per_lag, 50, eta_merge=1.0, merge_type="sequential")
    assert [r.location for r in reps] == [105, 300, 500]
    assert [c.count for c in clusters] == [2, 2, 1]
    _assert_partition(clusters, [p for pts in per_lag for p in pts])
    for left, right in zip(clusters, clusters[1:]):
        gap = min(m.location for m in right.members) - max(m.location for m in left.members)
        assert gap > 50


def test_sequential_merge_chains_points_through_their_neighbours():
    clusters = merge_sequential(_chain(), 50)
    assert len(clusters) == 1
    assert clusters[0].representative.location == 80
    _assert_partition(clusters, _chain())


def test_sequential_merge_keeps_the_first_of_tied_scores():
    clusters = merge_sequential([_p(10, 1.0, lag=1), _p(10, 1.0, lag=0), _p(20, 1.0)], 50)
    assert clusters[0].representative == _p(10, 1.0, lag=0)


def test_bottom_up_merge_seeds_from_the_highest_scores():
    clusters = merge_bottom_up(_chain(), 50)
    assert [c.representative.location for c in clusters] == [0, 80]
    assert sorted(m.location for m in clusters[1].members) == [40, 80, 120]
    _assert_partition(clusters, _chain())


def test_bottom_up_representatives_are_separated():
    points = [_p(loc, score) for loc, score in [(0, 1.0), (30, 4.0), (70, 2.0), (95, 3.5), (160, 0.2), (200, 1.1)]]
    clusters = merge_bottom_up(points, 40)
    reps = [c.representative for c in clusters]
    for a, b in itertools.combinations(reps, 2):
        assert abs(a.location - b.location) > 40
    for c in clusters:
        assert all(m.score <= c.representative.score for m in c.members)
    _assert_partition(clusters, points)


def test_merge_multilag_of_nothing_is_empty():
    assert merge_multilag([[], []], 50) == ([], [])


def test_merge_multilag_rejects_bad_options():
    with pytest.raises(ConfigurationError, match="merging type"):
        merge_multilag([[_p(1, 1.0)]], 50, merge_type="top-down")
    with pytest.raises(InvalidParameterError):
        merge_multilag([[_p(1, 1.0)]], 50, eta_merge=0.0)


def test_multiscale_merge_prefers_earlier_bandwidths():
    fine = [_p(100, 0.1, bandwidth=20), _p(300, 0.1, bandwidth=20)]
    coarse = [_p(110, 9.0, bandwidth=50), _p(200, 9.0, bandwidth=50)]
    merged = merge_multiscale([fine, coarse], eta_bottom_up=0.8)
    assert [(p.location, p.bandwidth) for p in merged] == [(100, 20), (200, 50), (300, 20)]


def test_multiscale_merge_is_idempotent():
    fine = [_p(100, 0.1, bandwidth=20), _p(300, 0.1, bandwidth=20)]
    coarse = [_p(110, 9.0, bandwidth=50), _p(200, 9.0, bandwidth=50), _p(330, 1.0, bandwidth=50)]
    merged = merge_multiscale([fine, coarse], eta_bottom_up=0.8)
    again = merge_multiscale(pool_by_bandwidth(merged, [20, 50]), eta_bottom_up=0.8)
    assert again == merged
    for a, b in itertools.combinations(merged, 2):
        assert abs(a.location - b.location) >= 0.8 * min(a.bandwidth, b.bandwidth)


def test_pool_by_bandwidth_keeps_unlisted_bandwidths():
    points = [_p(10, 1.0, bandwidth=30), _p(20, 1.0, bandwidth=99), _p(5, 1.0, bandwidth=10)]
    pooled = pool_by_bandwidth(points, [10, 30])
    assert [[p.bandwidth for p in group] for group in pooled] == [[10], [30], [99]]


def test_multiscale_merge_rejects_nonpositive_eta():
    assert merge_multiscale([], eta_bottom_up=0.8) == []
    with pytest.raises(InvalidParameterError):
        merge_multiscale([[_p(1, 1.0)]], eta_bottom_up=0.0)

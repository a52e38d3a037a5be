"""
Merging of candidate change points detected at several lags into clusters of mutually close estimators, with one representative per cluster.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, Union

from config import settings
from npmojo.changepoint.extraction import CandidatePoint
from npmojo.enums import MergeType
from npmojo.exceptions import InvalidParameterError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateCluster:
    representative: CandidatePoint
    members: Tuple[CandidatePoint, ...]

    @property
    def count(self) -> int:
        return len(self.members)


@dataclass
class _Group:
    representative: CandidatePoint
    members: List[CandidatePoint] = field(default_factory=list)

    def freeze(self) -> CandidateCluster:
        return CandidateCluster(representative=self.representative, members=tuple(self.members))


def _flatten(per_lag: Iterable[Sequence[CandidatePoint]]) -> List[CandidatePoint]:
    return [p for points in per_lag for p in points]


def merge_sequential(candidates: Sequence[CandidatePoint], distance: float) -> List[CandidateCluster]:
    if not candidates:
        return []

    ordered = sorted(candidates, key=lambda p: (p.location, p.lag))
    groups: List[_Group] = []
    current = _Group(representative=ordered[0], members=[ordered[0]])
    right_bound = ordered[0].location

    for p in ordered[1:]:
        if p.location - right_bound > distance:
            groups.append(current)
            current = _Group(representative=p, members=[p])
        else:
            current.members.append(p)
            if p.score > current.representative.score:
                current.representative = p
        right_bound = max(right_bound, p.location)

    groups.append(current)
    return [g.freeze() for g in groups]


def merge_bottom_up(candidates: Sequence[CandidatePoint], distance: float) -> List[CandidateCluster]:
    ordered = sorted(candidates, key=lambda p: (-p.score, p.location, p.lag))
    groups: List[_Group] = []

    for p in ordered:
        gaps = [abs(p.location - g.representative.location) for g in groups]
        if not gaps or min(gaps) > distance:
            groups.append(_Group(representative=p, members=[p]))
            continue
        # seeds accepted so far all score at least as high as p
        groups[gaps.index(min(gaps))].members.append(p)

    groups.sort(key=lambda g: g.representative.location)
    return [g.freeze() for g in groups]


def merge_multilag(
    per_lag: Iterable[Sequence[CandidatePoint]],
    bandwidth: int,
    eta_merge: float | None = None,
    merge_type: Union[MergeType, str, None] = None,
) -> Tuple[List[CandidatePoint], List[CandidateCluster]]:
    """Merge per-lag candidates into location-ordered representatives and their clusters."""
    if eta_merge is None:
        eta_merge = settings.eta_merge
    if merge_type is None:
        merge_type = settings.merge_type
    merge_type = MergeType.parse(merge_type)
    if not eta_merge > 0:
        raise InvalidParameterError(f"eta.merge must be positive, got {eta_merge!r}.")

    candidates = _flatten(per_lag)
    distance = eta_merge * bandwidth
    if merge_type is MergeType.sequential:
        clusters = merge_sequential(candidates, distance)
    else:
        clusters = merge_bottom_up(candidates, distance)

    log.debug(
        "merge_multilag: type=%s G=%d candidates=%d clusters=%d",
        merge_type.value, bandwidth, len(candidates), len(clusters),
    )
    return [c.representative for c in clusters], clusters

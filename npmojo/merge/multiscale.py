"""
Bottom-up merging of change points found at several bandwidths.

Points are pooled bandwidth by bandwidth in the order the multi-lag stage
produced them and scanned once: a point is kept when it lies at least
``eta_bottom_up`` times its own bandwidth away from every point kept before
it. Arrival order, not score, decides between close points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from config import settings
from npmojo.changepoint.extraction import CandidatePoint
from npmojo.exceptions import InvalidParameterError

log = logging.getLogger(__name__)


def pool_by_bandwidth(points: Sequence[CandidatePoint], bandwidths: Sequence[int]) -> List[List[CandidatePoint]]:
    """Group points by their bandwidth tag, in the order of ``bandwidths``."""
    groups: Dict[int, List[CandidatePoint]] = {int(g): [] for g in bandwidths}
    for p in points:
        groups.setdefault(p.bandwidth, []).append(p)
    return list(groups.values())


def merge_multiscale(
    per_bandwidth: Sequence[Sequence[CandidatePoint]],
    eta_bottom_up: float | None = None,
) -> List[CandidatePoint]:
    if eta_bottom_up is None:
        eta_bottom_up = settings.eta_bottom_up
    if not eta_bottom_up > 0:
        raise InvalidParameterError(f"eta.bottom.up must be positive, got {eta_bottom_up!r}.")

    accepted: List[CandidatePoint] = []
    pooled = 0
    for points in per_bandwidth:
        for p in points:
            pooled += 1
            if all(abs(p.location - q.location) >= eta_bottom_up * p.bandwidth for q in accepted):
                accepted.append(p)

    log.debug("merge_multiscale: pooled=%d accepted=%d", pooled, len(accepted))
    return sorted(accepted, key=lambda p: p.location)

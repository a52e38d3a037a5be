"""
Change point extraction from a detector statistic and a threshold, by locating exceeding environments and applying the eta, epsilon or combined criterion.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from config import settings
from npmojo.enums import Criterion
from npmojo.statistic.mosum import StatisticSeries


@dataclass(frozen=True)
class CandidatePoint:
    location: int
    lag: int
    score: float
    bandwidth: int


def exceeding_environments(values: np.ndarray, threshold: float) -> List[Tuple[int, int]]:
    """Maximal runs ``[start, stop)`` of positions where ``values > threshold``."""
    above = np.concatenate([[False], np.asarray(values) > threshold, [False]])
    edges = np.flatnonzero(np.diff(above.astype(np.int8)))
    return [(int(a), int(b)) for a, b in zip(edges[::2], edges[1::2])]


def _eta_points(values: np.ndarray, start: int, stop: int, radius: int) -> List[int]:
    n = len(values)
    points: List[int] = []
    for i in range(start, stop):
        left = values[max(0, i - radius):i]
        right = values[i + 1:min(n, i + radius + 1)]
        if left.size and values[i] <= left.max():
            continue
        if right.size and values[i] < right.max():
            continue
        points.append(i)
    return points


def extract(
    stat: StatisticSeries,
    threshold: float,
    criterion: Union[Criterion, str, None] = None,
    eta: float | None = None,
    epsilon: float | None = None,
) -> List[CandidatePoint]:
    if criterion is None:
        criterion = settings.criterion
    if eta is None:
        eta = settings.eta
    if epsilon is None:
        epsilon = settings.epsilon
    criterion = Criterion.parse(criterion)

    values = stat.values
    G = stat.bandwidth
    radius = int(math.floor(eta * G))
    min_length = epsilon * G
    positions: List[int] = []

    for start, stop in exceeding_environments(values, threshold):
        if criterion.uses_epsilon and (stop - start) < min_length:
            continue
        if criterion.uses_eta:
            positions.extend(_eta_points(values, start, stop, radius))
        else:
            positions.append(start + int(np.argmax(values[start:stop])))

    return [
        CandidatePoint(
            location=int(stat.locations[i]),
            lag=stat.lag,
            score=float(values[i]),
            bandwidth=G,
        )
        for i in positions
    ]

"""
Lag embedding of a (possibly multivariate) series: each observation is concatenated with its lag-shifted counterpart.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numpy as np

from npmojo.exceptions import InvalidLagError


def lag_embed(series: np.ndarray, lag: int) -> np.ndarray:
    x = np.asarray(series, dtype=float)
    if x.ndim == 1:
        x = x[:, None]
    if lag < 0:
        raise InvalidLagError(f"Lag must be a nonnegative integer, got {lag!r}.")
    n = x.shape[0]
    return np.hstack([x[: n - lag], x[lag:]])

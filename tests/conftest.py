import os
import sys

import numpy as np
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def ar1(n: int, phi: float, rng: np.random.Generator) -> np.ndarray:
    x = np.zeros(n)
    eps = rng.standard_normal(n)
    x[0] = eps[0]
    for t in range(1, n):
        x[t] = phi * x[t - 1] + eps[t]
    return x


@pytest.fixture
def rng():
    return np.random.default_rng(20260417)


@pytest.fixture
def two_change_series(rng):
    """AR(1) noise with a mean shift at 100 and a variance drop at 300."""
    x = ar1(500, 0.3, rng)
    x[300:] *= 0.4
    x[100:] += 2.0
    return x


@pytest.fixture
def mean_shift_series(rng):
    x = rng.standard_normal(300)
    x[150:] += 3.0
    return x

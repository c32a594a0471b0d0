import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def irregular_x(rng):
    # strictly increasing, clearly non-uniform abscissas on [0, ~10]
    steps = rng.uniform(0.05, 0.5, size=40)
    return np.concatenate(([0.0], np.cumsum(steps)))


@pytest.fixture
def uniform_x():
    # dx = 0.25 is exact in binary, so every interval is bit-identical
    return 0.25 * np.arange(33, dtype=float)

import pytest
import numpy as np
from numpy import ndarray
from typing import List, Tuple


def brute_force_inversions(data, weights) -> float:
    total = 0.0
    for i in range(len(data)):
        for j in range(i + 1, len(data)):
            if data[i] > data[j]:
                total += weights[i] * weights[j]
    return total


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)


@pytest.fixture
def small_weighted_sample() -> Tuple[List[float], List[float]]:
    data = [3.0, 1.0, 2.0, 1.0, 5.0, 4.0, 2.0]
    weights = [1.0, 2.0, 0.5, 1.5, 1.0, 3.0, 0.25]
    return (data, weights)


@pytest.fixture
def tied_correlation_dataset(rng) -> Tuple[ndarray, ndarray, ndarray]:
    a = rng.integers(0, 5, size=40).astype(np.float64)
    b = a + rng.integers(-2, 3, size=40)
    weights = rng.uniform(0.1, 2.0, size=40)
    return (a, b, weights)


@pytest.fixture
def continuous_correlation_dataset(rng) -> Tuple[ndarray, ndarray, ndarray]:
    a = rng.normal(size=60)
    b = 0.5 * a + rng.normal(size=60)
    weights = rng.exponential(size=60)
    return (a, b, weights)

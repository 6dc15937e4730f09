"""Shared test fixtures for ordcache."""

import numpy as np
import pytest

from ordcache import OrderedCache


@pytest.fixture
def cache() -> OrderedCache:
    """Three entries; the last value breaks the ``v<n>`` pattern."""
    return OrderedCache().set("k1", "v1").set("k2", "v2").set("k3", "anomaly")


@pytest.fixture
def five_cache(cache) -> OrderedCache:
    return cache.multi_set([("k4", "v4"), ("k5", "v5")])


@pytest.fixture
def numeric_cache() -> OrderedCache:
    return OrderedCache.of((1, 2), (2, 4), (3, 6))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)

"""
Pytest configuration and shared fixtures

Fun fact: conftest.py fixtures are discovered automatically, so every test
module below gets a frozen clock and a seeded random source for free!
"""

import random
from datetime import datetime, timezone

import pytest

from ksuid_kit.config import EXTENDED, STANDARD, KsuidConfig
from ksuid_kit.kernel.entropy import InsecureRandomSource
from ksuid_kit.kernel.time import FrozenTimeProvider


@pytest.fixture
def test_time() -> FrozenTimeProvider:
    """
    Provide a controllable time provider for deterministic tests

    Default time: 2025-01-15 12:00:00 UTC, comfortably inside the range
    of both presets.
    """
    return FrozenTimeProvider(datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def seeded_source() -> InsecureRandomSource:
    """Reproducible random part source"""
    return InsecureRandomSource(seed=1234)


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for property-style loops"""
    return random.Random(20170714)


@pytest.fixture(params=[STANDARD, EXTENDED], ids=lambda config: config.name)
def config(request: pytest.FixtureRequest) -> KsuidConfig:
    """Each shipped preset in turn"""
    return request.param

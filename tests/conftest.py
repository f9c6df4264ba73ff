"""Pytest configuration and fixtures for slimesim tests."""

import pytest

from slimesim.config.settings import WorldBounds
from slimesim.genetics import Genome
from slimesim.util.rng import SeededRandom


@pytest.fixture
def rng():
    """Provide a deterministic RNG for tests."""
    return SeededRandom("test-seed")


@pytest.fixture
def bounds():
    """The default 800x600 world."""
    return WorldBounds(800, 600)


@pytest.fixture
def plain_genome():
    """A genome with round, mid-range values (no draws needed)."""
    return Genome.from_values(
        speed=1.0,
        size=1.0,
        energy_efficiency=1.0,
        color=0.5,
        sense_radius=100.0,
    )

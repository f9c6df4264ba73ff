"""Core utilities for the simulation."""

from slimesim.util.rng import (
    MissingRNGError,
    NonDeterministicRNGError,
    SeededRandom,
    require_deterministic,
    require_rng_param,
    string_to_seed,
)

__all__ = [
    "SeededRandom",
    "string_to_seed",
    "require_rng_param",
    "require_deterministic",
    "MissingRNGError",
    "NonDeterministicRNGError",
]

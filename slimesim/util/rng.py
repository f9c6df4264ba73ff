"""RNG utilities for deterministic simulation.

This module provides the seeded generator every stochastic component draws
from, plus guards that fail loudly when a component is built without one.

The generator is mulberry32: a 32-bit state advanced by a fixed odd
increment and run through an xor/shift/multiply mix. It is statistically
adequate for a simulation and, more importantly, produces the same sequence
for the same seed string on every platform.
"""

import logging
import math
import random
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_MASK_32 = 0xFFFFFFFF
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0

# Smallest value mulberry32 can produce above zero; keeps log(u1) finite
_MIN_BOX_MULLER_U1 = 1.0 / _TWO_POW_32


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This error indicates a bug in the simulation setup - all entities
    should receive the simulation's generator explicitly.
    """

    pass


class NonDeterministicRNGError(RuntimeError):
    """Raised when a deterministic generator is required but the RNG is unseeded."""

    pass


def string_to_seed(seed: str) -> int:
    """Derive an unsigned 32-bit seed from an arbitrary string.

    Rolling hash ``h = h * 31 + unit`` over the UTF-16 code units of the
    string, truncated to 32 bits. Lone surrogates hash as single units. Identical strings always give identical
    seeds.
    """
    encoded = seed.encode("utf-16-le", "surrogatepass")
    hash_value = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        hash_value = (hash_value * 31 + unit) & _MASK_32
    return hash_value


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK_32


class SeededRandom:
    """Seeded pseudo-random generator shared by one simulation.

    All consumers of one simulation share the same instance; determinism
    depends on single-threaded, strictly ordered draws.

    Attributes:
        seed_string: The string the generator was seeded from (None if unseeded)
    """

    def __init__(self, seed: Optional[str] = None) -> None:
        self.seed_string: Optional[str] = None
        self._state: int = 0
        self._fallback: Optional[random.Random] = None
        self._warned: bool = False
        if seed is not None:
            self.init(seed)

    def init(self, seed: str) -> None:
        """(Re)seed the generator from a string."""
        self.seed_string = str(seed)
        self._state = string_to_seed(self.seed_string)
        self._fallback = None

    @property
    def is_deterministic(self) -> bool:
        """True once the generator has been seeded."""
        return self.seed_string is not None

    def getstate(self) -> Tuple[Optional[str], int]:
        """Capture the generator state for a later replay."""
        return (self.seed_string, self._state)

    def setstate(self, state: Tuple[Optional[str], int]) -> None:
        """Restore a state captured with :meth:`getstate`."""
        seed_string, internal = state
        if seed_string is None:
            raise NonDeterministicRNGError("Cannot restore the state of an unseeded generator")
        self.seed_string = seed_string
        self._state = int(internal) & _MASK_32
        self._fallback = None

    def _fallback_random(self) -> float:
        if not self._warned:
            logger.warning(
                "Random generator not initialized with a seed; "
                "falling back to a non-deterministic source"
            )
            self._warned = True
        if self._fallback is None:
            self._fallback = random.Random()
        return self._fallback.random()

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        if not self.is_deterministic:
            return self._fallback_random()

        self._state = (self._state + _MULBERRY_INCREMENT) & _MASK_32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK_32
        return ((t ^ (t >> 14)) & _MASK_32) / _TWO_POW_32

    def randint(self, a: int, b: int) -> int:
        """Return an integer in [a, b], both ends inclusive."""
        return int(math.floor(self.random() * (b - a + 1))) + a

    def uniform(self, a: float, b: float) -> float:
        """Return a float in [a, b)."""
        return a + self.random() * (b - a)

    def normal(self, mean: float, std_dev: float, min_value: float, max_value: float) -> float:
        """Draw from a normal distribution and clamp the result into bounds.

        Box-Muller transform consuming two draws. Out-of-range values are
        clamped, not resampled, so probability mass piles up on the bounds.
        """
        u1 = self.random()
        u2 = self.random()
        if u1 <= 0.0:
            u1 = _MIN_BOX_MULLER_U1
        z0 = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        value = mean + std_dev * z0
        return max(min_value, min(max_value, value))

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed_string!r})"


def require_rng_param(rng: Optional[SeededRandom], context: str) -> SeededRandom:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Use this in constructors and methods that require an RNG to be passed in,
    instead of silently creating an unseeded fallback.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the simulation's SeededRandom explicitly."
        )
    return rng


def require_deterministic(rng: SeededRandom, context: str = "unknown") -> SeededRandom:
    """Return *rng* if it is seeded, otherwise raise.

    Replays and tests call this so they never run on the fallback source.

    Raises:
        NonDeterministicRNGError: If the generator was never seeded
    """
    if not rng.is_deterministic:
        raise NonDeterministicRNGError(
            f"Deterministic RNG required ({context}); call init(seed) first."
        )
    return rng

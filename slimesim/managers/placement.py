"""Spawn position search shared by the entity managers."""

from typing import Iterable, Optional

from slimesim.config.settings import WorldBounds
from slimesim.config.simulation import MAX_PLACEMENT_ATTEMPTS
from slimesim.math_utils import Vector2
from slimesim.util.rng import SeededRandom


def find_spawn_position(
    rng: SeededRandom,
    bounds: WorldBounds,
    padding: float,
    existing_positions: Iterable[Vector2],
    min_separation: float,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Optional[Vector2]:
    """Find a random spawn point away from existing entities.

    Each attempt draws x then y uniformly inside the padded area
    (``width * padding`` to ``width * (1 - padding)``, likewise for height).
    The first candidate at least *min_separation* from every existing
    position wins.

    Args:
        rng: Simulation random source
        bounds: World size
        padding: Fraction of each edge kept clear
        existing_positions: Positions of entities already placed
        min_separation: Minimum distance to any existing entity
        max_attempts: Candidates to try before giving up

    Returns:
        A free position, or None if every attempt was too crowded
    """
    occupied = list(existing_positions)
    min_x = bounds.width * padding
    max_x = bounds.width * (1 - padding)
    min_y = bounds.height * padding
    max_y = bounds.height * (1 - padding)

    for _ in range(max_attempts):
        candidate = Vector2(rng.uniform(min_x, max_x), rng.uniform(min_y, max_y))
        if all(candidate.distance_to(pos) >= min_separation for pos in occupied):
            return candidate
    return None

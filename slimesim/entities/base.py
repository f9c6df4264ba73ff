"""Shared enums for simulation entities."""

from enum import Enum, IntEnum
from typing import Tuple


class Direction(IntEnum):
    """Facing of a slime. Values match ``randint(0, 3)`` draws."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def unit_vector(self) -> Tuple[float, float]:
        """Screen-space unit vector (y grows downwards)."""
        return _DIRECTION_VECTORS[self]


_DIRECTION_VECTORS = {
    Direction.UP: (0.0, -1.0),
    Direction.RIGHT: (1.0, 0.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
}


class MovementMode(Enum):
    NORMAL = "normal"
    SPRINT = "sprint"


class LifeState(Enum):
    """Lifecycle of a slime.

    ALIVE -> DYING (fade-out) -> REMOVED. REMOVED is terminal.
    """

    ALIVE = "alive"
    DYING = "dying"
    REMOVED = "removed"


class SlimeUpdateResult(Enum):
    """What happened to a slime during one tick.

    The owning manager acts on this instead of relying on callbacks:
    JUST_DIED marks the single tick on which energy ran out, REMOVED the
    single tick on which the fade finished (and every tick after it).
    """

    ALIVE = "alive"
    JUST_DIED = "just_died"
    DYING = "dying"
    REMOVED = "removed"

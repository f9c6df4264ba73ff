"""Configuration package for the slime simulation.

Constants live in plain modules (``slime``, ``food``, ``simulation``);
host-supplied settings are validated by the models in ``settings``.
"""

from slimesim.config.settings import (
    FoodConfig,
    SimulationSettings,
    SpawnConfig,
    WorldBounds,
    coerce_config,
    update_config,
)

__all__ = [
    "FoodConfig",
    "SimulationSettings",
    "SpawnConfig",
    "WorldBounds",
    "coerce_config",
    "update_config",
]

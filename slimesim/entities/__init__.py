"""Simulation entities: slimes and the food they eat."""

from slimesim.entities.base import Direction, LifeState, MovementMode, SlimeUpdateResult
from slimesim.entities.food import Food, FoodType
from slimesim.entities.slime import Slime

__all__ = [
    "Direction",
    "Food",
    "FoodType",
    "LifeState",
    "MovementMode",
    "Slime",
    "SlimeUpdateResult",
]

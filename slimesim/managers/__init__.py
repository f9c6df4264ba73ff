"""Population and resource managers."""

from slimesim.managers.food_manager import FoodManager
from slimesim.managers.placement import find_spawn_position
from slimesim.managers.slime_manager import SlimeManager

__all__ = ["FoodManager", "SlimeManager", "find_spawn_position"]

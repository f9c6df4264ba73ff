"""Food spawning and lifecycle."""

import logging
from typing import Any, List, Mapping, Optional, Union

from slimesim.config.settings import FoodConfig, WorldBounds, coerce_config, update_config
from slimesim.config.simulation import FOOD_MIN_SEPARATION
from slimesim.entities.food import Food, FoodType
from slimesim.managers.base import SpawningManager
from slimesim.managers.placement import find_spawn_position
from slimesim.util.rng import SeededRandom

logger = logging.getLogger(__name__)


class FoodManager(SpawningManager[Food]):
    """Spawns food over time and tracks uneaten food.

    Consumed food is not dropped automatically; the owner removes it with
    :meth:`remove_food` once contact handling is done.

    Attributes:
        config: Validated food settings
    """

    entity_label = "food"

    def __init__(
        self,
        rng: SeededRandom,
        config: Optional[Union[FoodConfig, Mapping[str, Any]]] = None,
        bounds: Optional[WorldBounds] = None,
    ) -> None:
        """Initialize the manager.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        super().__init__(rng, bounds)
        self.config: FoodConfig = coerce_config(config, FoodConfig, "food config")

    @property
    def _initial_count(self) -> int:
        return self.config.initial_count

    @property
    def _max_count(self) -> int:
        return self.config.max_count

    @property
    def _spawn_interval_ms(self) -> float:
        return self.config.spawn_interval_ms

    def _determine_food_type(self) -> FoodType:
        """Pick a tier: special first, then premium, else basic (one draw)."""
        roll = self.rng.random()
        if roll < self.config.special_food_chance:
            return FoodType.SPECIAL
        if roll < self.config.special_food_chance + self.config.premium_food_chance:
            return FoodType.PREMIUM
        return FoodType.BASIC

    def _spawn(self) -> Optional[Food]:
        position = find_spawn_position(
            self.rng,
            self.bounds,
            self.config.spawn_area_padding,
            (food.position for food in self._entities),
            FOOD_MIN_SEPARATION,
        )
        if position is None:
            return None
        food_type = self._determine_food_type()
        return Food(food_type, rng=self.rng, position=position)

    def remove_food(self, food: Food) -> bool:
        """Stop tracking *food*. Unknown food is ignored.

        Returns:
            True if the food was managed and has been removed
        """
        return self._remove(food)

    def get_food_count(self) -> int:
        return self.get_count()

    def get_all_food(self) -> List[Food]:
        """Return a copy of the managed food."""
        return list(self._entities)

    def update_config(self, **changes: Any) -> FoodConfig:
        """Apply a partial configuration change.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.config = update_config(self.config, changes, "food config")
        return self.config

"""Food resources that slimes consume for energy."""

import logging
from enum import IntEnum
from typing import Callable, Optional, Tuple

from slimesim.config.food import (
    BASIC_FOOD_COLOR,
    BASIC_NUTRITION,
    BASIC_SIZE_RANGE,
    PREMIUM_FOOD_COLOR,
    PREMIUM_NUTRITION,
    PREMIUM_SIZE_RANGE,
    SPECIAL_FOOD_COLOR,
    SPECIAL_NUTRITION,
    SPECIAL_SIZE_RANGE,
)
from slimesim.math_utils import Vector2
from slimesim.util.rng import SeededRandom

logger = logging.getLogger(__name__)


class FoodType(IntEnum):
    """Food tiers, from most to least common."""

    BASIC = 0
    PREMIUM = 1
    SPECIAL = 2

    @property
    def nutrition(self) -> float:
        return _FOOD_PROPERTIES[self][0]

    @property
    def size_range(self) -> Tuple[float, float]:
        return _FOOD_PROPERTIES[self][1]

    @property
    def color(self) -> Tuple[int, int, int]:
        return _FOOD_PROPERTIES[self][2]


_FOOD_PROPERTIES = {
    FoodType.BASIC: (BASIC_NUTRITION, BASIC_SIZE_RANGE, BASIC_FOOD_COLOR),
    FoodType.PREMIUM: (PREMIUM_NUTRITION, PREMIUM_SIZE_RANGE, PREMIUM_FOOD_COLOR),
    FoodType.SPECIAL: (SPECIAL_NUTRITION, SPECIAL_SIZE_RANGE, SPECIAL_FOOD_COLOR),
}

ConsumedCallback = Callable[["Food"], None]


class Food:
    """A single food item (pure logic, no rendering).

    Food can be eaten exactly once. The first ``consume()`` hands out the
    full nutritional value; every later call returns 0.

    Attributes:
        food_type: Tier of this food
        position: Location in world pixels
        size: Display size in pixels
    """

    def __init__(
        self,
        food_type: FoodType = FoodType.BASIC,
        rng: Optional[SeededRandom] = None,
        position: Optional[Vector2] = None,
    ) -> None:
        """Initialize a food item.

        Args:
            food_type: Tier of food
            rng: Used for the size draw; without it the middle of the
                tier's size range is used and nothing is drawn
            position: World position (origin if omitted)
        """
        self.food_type = FoodType(food_type)
        self.position: Vector2 = position.copy() if position is not None else Vector2()

        size_min, size_max = self.food_type.size_range
        if rng is not None:
            self.size: float = rng.uniform(size_min, size_max)
        else:
            self.size = (size_min + size_max) / 2

        self._consumed = False
        self._on_consumed: Optional[ConsumedCallback] = None

    @property
    def nutritional_value(self) -> float:
        return self.food_type.nutrition

    @property
    def radius(self) -> float:
        """Collision radius (half the display size)."""
        return self.size / 2

    @property
    def color(self) -> Tuple[int, int, int]:
        return self.food_type.color

    @property
    def is_consumed(self) -> bool:
        return self._consumed

    def set_consumed_callback(self, callback: Optional[ConsumedCallback]) -> None:
        """Register a function called once, when this food is first eaten."""
        self._on_consumed = callback

    def consume(self) -> float:
        """Eat this food.

        Returns:
            The nutritional value on the first call, 0.0 afterwards
        """
        if self._consumed:
            return 0.0
        self._consumed = True
        logger.debug("%s food consumed at %s", self.food_type.name, self.position)
        if self._on_consumed is not None:
            self._on_consumed(self)
        return self.nutritional_value

    def __repr__(self) -> str:
        return (
            f"Food({self.food_type.name}, pos=({self.position.x:.1f}, {self.position.y:.1f}), "
            f"consumed={self._consumed})"
        )

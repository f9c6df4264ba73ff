"""Tests for FoodManager spawning and bookkeeping."""

import pytest

from slimesim.config.settings import FoodConfig
from slimesim.entities import FoodType
from slimesim.exceptions import ConfigurationError
from slimesim.managers import FoodManager
from slimesim.math_utils import Vector2
from slimesim.util.rng import SeededRandom
from tests.fakes.scripted_rng import ScriptedRandom


def test_default_initial_food(rng):
    manager = FoodManager(rng)
    food = manager.initialize()
    assert len(food) == 30
    assert manager.get_food_count() == 30
    for i, item in enumerate(food):
        for other in food[i + 1 :]:
            assert item.position.distance_to(other.position) >= 20.0


def test_spawn_draw_order():
    """Position (x, y), then the type roll, then the size."""
    rng = ScriptedRandom([0.5, 0.5, 0.1, 0.0])
    food = FoodManager(rng, {"initial_count": 1}).initialize()[0]
    assert rng.remaining == 0
    assert food.position == Vector2(400.0, 300.0)
    assert food.food_type is FoodType.PREMIUM
    assert food.size == 8.0


@pytest.mark.parametrize(
    "roll,expected",
    [
        (0.0, FoodType.SPECIAL),
        (0.049, FoodType.SPECIAL),
        (0.05, FoodType.PREMIUM),
        (0.199, FoodType.PREMIUM),
        (0.21, FoodType.BASIC),
        (0.99, FoodType.BASIC),
    ],
)
def test_type_thresholds(roll, expected):
    rng = ScriptedRandom([0.5, 0.5, roll, 0.5])
    food = FoodManager(rng, {"initial_count": 1}).initialize()[0]
    assert food.food_type is expected


def test_type_chances_can_force_a_type(rng):
    specials = FoodManager(
        rng, {"special_food_chance": 1.0, "premium_food_chance": 0.0}
    ).initialize()
    assert {f.food_type for f in specials} == {FoodType.SPECIAL}

    basics = FoodManager(
        SeededRandom("basic"), {"special_food_chance": 0.0, "premium_food_chance": 0.0}
    ).initialize()
    assert {f.food_type for f in basics} == {FoodType.BASIC}


def test_update_spawns_on_interval(rng):
    manager = FoodManager(rng, {"initial_count": 0})
    manager.initialize()
    assert manager.update(1999.0) == []
    assert len(manager.update(1.0)) == 1
    assert manager.get_food_count() == 1


def test_update_stops_at_max(rng):
    manager = FoodManager(rng, {"initial_count": 45, "max_count": 50})
    manager.initialize()
    spawned = manager.update(60000.0)
    assert len(spawned) == 5
    assert manager.get_food_count() == 50
    assert manager.update(60000.0) == []


def test_consumed_food_stays_until_removed(rng):
    manager = FoodManager(rng, {"initial_count": 3})
    food = manager.initialize()
    food[0].consume()
    assert manager.get_food_count() == 3
    assert manager.remove_food(food[0]) is True
    assert manager.get_all_food() == food[1:]
    assert manager.remove_food(food[0]) is False


def test_get_all_food_returns_copy(rng):
    manager = FoodManager(rng, {"initial_count": 3})
    manager.initialize()
    manager.get_all_food().clear()
    assert manager.get_food_count() == 3


def test_defaults(rng):
    assert FoodManager(rng).config == FoodConfig(
        initial_count=30,
        spawn_rate=0.5,
        max_count=50,
        spawn_area_padding=0.1,
        special_food_chance=0.05,
        premium_food_chance=0.15,
    )


@pytest.mark.parametrize(
    "config",
    [
        {"spawn_rate": 0.0},
        {"initial_count": 60, "max_count": 50},
        {"max_count": -1},
        {"special_food_chance": 1.5},
        {"premium_food_chance": -0.1},
        {"special_food_chance": 0.6, "premium_food_chance": 0.5},
        {"spawn_area_padding": 0.6},
    ],
)
def test_invalid_config_rejected(rng, config):
    with pytest.raises(ConfigurationError):
        FoodManager(rng, config)


def test_update_config(rng):
    manager = FoodManager(rng)
    manager.update_config(special_food_chance=0.5)
    assert manager.config.special_food_chance == 0.5
    with pytest.raises(ConfigurationError):
        manager.update_config(premium_food_chance=0.6)
    assert manager.config.premium_food_chance == 0.15

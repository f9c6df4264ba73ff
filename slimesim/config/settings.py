"""Validated configuration models.

Spawn settings arrive from hosts as plain mappings (often parsed from a
JSON file), so they are validated with pydantic and rejected up front.
Keys may use either snake_case or the camelCase names used by scene
JSON files.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from slimesim.config.simulation import (
    DEFAULT_FOOD_SPAWN_RATE,
    DEFAULT_INITIAL_FOOD,
    DEFAULT_INITIAL_POPULATION,
    DEFAULT_MAX_FOOD,
    DEFAULT_MAX_POPULATION,
    DEFAULT_PREMIUM_FOOD_CHANCE,
    DEFAULT_SEED,
    DEFAULT_SLIME_SPAWN_RATE,
    DEFAULT_SPAWN_AREA_PADDING,
    DEFAULT_SPECIAL_FOOD_CHANCE,
    DEFAULT_WORLD_HEIGHT,
    DEFAULT_WORLD_WIDTH,
    SCENE_FOOD_SPAWN_RATE,
    SCENE_INITIAL_FOOD,
    SCENE_MAX_FOOD,
)
from slimesim.exceptions import ConfigurationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class WorldBounds:
    """Size of the simulated area in pixels, origin at the top-left."""

    width: float = DEFAULT_WORLD_WIDTH
    height: float = DEFAULT_WORLD_HEIGHT


class _SettingsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SpawnConfig(_SettingsModel):
    """Slime population settings.

    Attributes:
        initial_population: Slimes created by ``initialize()``
        spawn_rate: Slimes per second
        max_population: Population cap enforced by ``update()``
        spawn_area_padding: Fraction of each edge kept clear (0 to <0.5)
    """

    initial_population: int = Field(DEFAULT_INITIAL_POPULATION, ge=0)
    spawn_rate: float = Field(DEFAULT_SLIME_SPAWN_RATE, gt=0)
    max_population: int = Field(DEFAULT_MAX_POPULATION, ge=0)
    spawn_area_padding: float = Field(DEFAULT_SPAWN_AREA_PADDING, ge=0.0, lt=0.5)

    @model_validator(mode="after")
    def _initial_within_max(self) -> "SpawnConfig":
        if self.initial_population > self.max_population:
            raise ValueError(
                f"initial_population ({self.initial_population}) exceeds "
                f"max_population ({self.max_population})"
            )
        return self

    @property
    def spawn_interval_ms(self) -> float:
        """Milliseconds between successive spawns."""
        return 1000.0 / self.spawn_rate


class FoodConfig(_SettingsModel):
    """Food spawning settings.

    Type chances are checked Special first, then Premium; the remaining
    probability mass is Basic.
    """

    initial_count: int = Field(DEFAULT_INITIAL_FOOD, ge=0)
    spawn_rate: float = Field(DEFAULT_FOOD_SPAWN_RATE, gt=0)
    max_count: int = Field(DEFAULT_MAX_FOOD, ge=0)
    spawn_area_padding: float = Field(DEFAULT_SPAWN_AREA_PADDING, ge=0.0, lt=0.5)
    special_food_chance: float = Field(DEFAULT_SPECIAL_FOOD_CHANCE, ge=0.0, le=1.0)
    premium_food_chance: float = Field(DEFAULT_PREMIUM_FOOD_CHANCE, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_totals(self) -> "FoodConfig":
        if self.initial_count > self.max_count:
            raise ValueError(
                f"initial_count ({self.initial_count}) exceeds max_count ({self.max_count})"
            )
        if self.special_food_chance + self.premium_food_chance > 1.0:
            raise ValueError("special_food_chance + premium_food_chance must not exceed 1.0")
        return self

    @property
    def spawn_interval_ms(self) -> float:
        """Milliseconds between successive spawns."""
        return 1000.0 / self.spawn_rate


def _scene_food_config() -> FoodConfig:
    return FoodConfig(
        initial_count=SCENE_INITIAL_FOOD,
        spawn_rate=SCENE_FOOD_SPAWN_RATE,
        max_count=SCENE_MAX_FOOD,
    )


class SimulationSettings(_SettingsModel):
    """Everything a host needs to start a simulation."""

    seed: str = DEFAULT_SEED
    world_width: float = Field(DEFAULT_WORLD_WIDTH, gt=0)
    world_height: float = Field(DEFAULT_WORLD_HEIGHT, gt=0)
    slimes: SpawnConfig = Field(default_factory=SpawnConfig)
    food: FoodConfig = Field(default_factory=_scene_food_config)

    @property
    def bounds(self) -> WorldBounds:
        return WorldBounds(self.world_width, self.world_height)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SimulationSettings":
        """Validate settings from a plain mapping."""
        return coerce_config(data, cls, "simulation settings")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SimulationSettings":
        """Load settings from a JSON file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        try:
            data = orjson.loads(Path(path).read_bytes())
        except OSError as e:
            raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e
        except orjson.JSONDecodeError as e:
            raise ConfigurationError(f"Settings file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {path} must contain a JSON object")
        return cls.from_mapping(data)


def coerce_config(
    value: Optional[Union[ModelT, Mapping[str, Any]]],
    model: Type[ModelT],
    context: str,
) -> ModelT:
    """Turn ``None``, a mapping or a model instance into a validated model.

    Raises:
        ConfigurationError: If validation fails
    """
    if value is None:
        return model()
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"Invalid {context}: expected {model.__name__} or mapping, got {type(value).__name__}"
        )
    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {context}: {e}") from e


def update_config(config: ModelT, changes: Mapping[str, Any], context: str) -> ModelT:
    """Return a re-validated copy of *config* with *changes* applied.

    Changes use the snake_case field names.

    Raises:
        ConfigurationError: On unknown fields or if the result is invalid
    """
    unknown = sorted(set(changes) - set(type(config).model_fields))
    if unknown:
        raise ConfigurationError(f"Invalid {context}: unknown field(s) {unknown}")
    merged = config.model_dump()
    merged.update(changes)
    return coerce_config(merged, type(config), context)

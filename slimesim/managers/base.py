"""Timed spawning shared by the slime and food managers."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from slimesim.config.settings import WorldBounds
from slimesim.util.rng import SeededRandom, require_rng_param

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class SpawningManager(ABC, Generic[EntityT]):
    """Owns a list of entities and tops it up at a fixed rate.

    Subclasses provide the spawn itself and the limits; this class keeps the
    time accumulator and the population list.

    Attributes:
        bounds: World area entities are placed in
        rng: Simulation random source
    """

    #: Used in log messages
    entity_label = "entity"

    def __init__(self, rng: SeededRandom, bounds: Optional[WorldBounds] = None) -> None:
        self.rng = require_rng_param(rng, f"{type(self).__name__}.__init__")
        self.bounds = bounds if bounds is not None else WorldBounds()
        self._entities: List[EntityT] = []
        self._time_since_last_spawn = 0.0

    @property
    @abstractmethod
    def _initial_count(self) -> int: ...

    @property
    @abstractmethod
    def _max_count(self) -> int: ...

    @property
    @abstractmethod
    def _spawn_interval_ms(self) -> float: ...

    @abstractmethod
    def _spawn(self) -> Optional[EntityT]:
        """Create one entity at a free position, or None if none was found."""

    def _register(self, entity: EntityT) -> None:
        self._entities.append(entity)

    def initialize(self) -> List[EntityT]:
        """Clear the population and spawn the initial set.

        Spawns whose placement fails are skipped, so fewer entities than
        configured may be created in a crowded world.

        Returns:
            The entities created
        """
        self._entities = []
        self._time_since_last_spawn = 0.0
        for _ in range(self._initial_count):
            entity = self._spawn()
            if entity is not None:
                self._register(entity)
            else:
                logger.debug("Initial %s spawn skipped: no free position", self.entity_label)
        logger.info(
            "Initialized %d/%d %s(s)", len(self._entities), self._initial_count, self.entity_label
        )
        return list(self._entities)

    def update(self, elapsed_ms: float) -> List[EntityT]:
        """Advance the spawn timer and spawn whatever is due.

        Time only accumulates while below the maximum. A failed placement
        still uses up its spawn interval and ends spawning for this call.

        Returns:
            The entities created during this call
        """
        spawned: List[EntityT] = []
        if len(self._entities) >= self._max_count:
            return spawned

        self._time_since_last_spawn += elapsed_ms
        interval = self._spawn_interval_ms
        while self._time_since_last_spawn >= interval and len(self._entities) < self._max_count:
            self._time_since_last_spawn -= interval
            entity = self._spawn()
            if entity is None:
                logger.debug("%s spawn skipped: no free position", self.entity_label.capitalize())
                break
            self._register(entity)
            spawned.append(entity)
        return spawned

    def _remove(self, entity: EntityT) -> bool:
        """Remove by identity. Returns False if the entity was not managed."""
        for index, candidate in enumerate(self._entities):
            if candidate is entity:
                del self._entities[index]
                return True
        return False

    def get_count(self) -> int:
        return len(self._entities)

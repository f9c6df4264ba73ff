"""Slime population management.

Spawns the founding population, tops the population up over time and
tracks which slimes are still in the world.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from slimesim.config.settings import SpawnConfig, WorldBounds, coerce_config, update_config
from slimesim.config.simulation import SLIME_MIN_SEPARATION
from slimesim.entities.slime import Slime
from slimesim.genetics import Genome
from slimesim.managers.base import SpawningManager
from slimesim.managers.placement import find_spawn_position
from slimesim.util.rng import SeededRandom

logger = logging.getLogger(__name__)


class SlimeManager(SpawningManager[Slime]):
    """Keeps the slime population between spawns and removals.

    Attributes:
        config: Validated spawn settings
    """

    entity_label = "slime"

    def __init__(
        self,
        rng: SeededRandom,
        config: Optional[Union[SpawnConfig, Mapping[str, Any]]] = None,
        bounds: Optional[WorldBounds] = None,
    ) -> None:
        """Initialize the manager.

        Args:
            rng: Simulation random source
            config: SpawnConfig or a mapping of its fields (defaults if None)
            bounds: World size (800x600 if None)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        super().__init__(rng, bounds)
        self.config: SpawnConfig = coerce_config(config, SpawnConfig, "slime spawn config")
        self._next_slime_id = 1

    @property
    def _initial_count(self) -> int:
        return self.config.initial_population

    @property
    def _max_count(self) -> int:
        return self.config.max_population

    @property
    def _spawn_interval_ms(self) -> float:
        return self.config.spawn_interval_ms

    def _spawn(self) -> Optional[Slime]:
        position = find_spawn_position(
            self.rng,
            self.bounds,
            self.config.spawn_area_padding,
            (slime.position for slime in self._entities),
            SLIME_MIN_SEPARATION,
        )
        if position is None:
            return None

        slime = Slime(self.rng, genome=Genome.random(self.rng), position=position, bounds=self.bounds)
        slime.stop_moving()
        return slime

    def _register(self, slime: Slime) -> None:
        slime.slime_id = self._next_slime_id
        self._next_slime_id += 1
        super()._register(slime)

    def add_slime(self, slime: Slime) -> bool:
        """Adopt a slime created elsewhere (e.g. by reproduction).

        Returns:
            False if the slime is already managed or the population is
            at its maximum
        """
        if any(existing is slime for existing in self._entities):
            logger.debug("Slime %d already managed; not added again", slime.slime_id)
            return False
        if len(self._entities) >= self.config.max_population:
            logger.debug("Population full (%d); slime not added", len(self._entities))
            return False
        self._register(slime)
        return True

    def remove_slime(self, slime: Slime) -> bool:
        """Stop tracking *slime*. Unknown slimes are ignored.

        Returns:
            True if the slime was managed and has been removed
        """
        return self._remove(slime)

    def get_population(self) -> int:
        return self.get_count()

    def get_slimes(self) -> List[Slime]:
        """Return a copy of the managed slimes."""
        return list(self._entities)

    def update_config(self, **changes: Any) -> SpawnConfig:
        """Apply a partial configuration change.

        Raises:
            ConfigurationError: If the merged configuration is invalid (the
                current configuration is kept)
        """
        self.config = update_config(self.config, changes, "slime spawn config")
        return self.config

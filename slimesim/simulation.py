"""Headless simulation driver.

Simulation ties the two managers, the shared random source and a
presentation sink together. A host engine calls :meth:`Simulation.tick`
once per frame and :meth:`Simulation.handle_contact` for every slime/food
collision it detects; the sink hears about every entity that appears,
changes or goes away.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from slimesim.config.settings import SimulationSettings, coerce_config
from slimesim.entities.base import SlimeUpdateResult
from slimesim.entities.food import Food
from slimesim.entities.slime import Slime
from slimesim.exceptions import SimulationError
from slimesim.genetics import GENE_NAMES
from slimesim.interfaces import NullPresentationSink, PresentationSink
from slimesim.managers import FoodManager, SlimeManager
from slimesim.util.rng import SeededRandom

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """What changed during one simulation tick."""

    spawned_slimes: List[Slime] = field(default_factory=list)
    spawned_food: List[Food] = field(default_factory=list)
    died: List[Slime] = field(default_factory=list)
    removed: List[Slime] = field(default_factory=list)


@dataclass(frozen=True)
class SimulationStats:
    """Snapshot of population figures for logging and display."""

    elapsed_ms: float
    population: int
    max_population: int
    food_count: int
    max_food: int
    total_births: int
    total_deaths: int
    mean_genes: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elapsed_ms": self.elapsed_ms,
            "population": self.population,
            "max_population": self.max_population,
            "food_count": self.food_count,
            "max_food": self.max_food,
            "total_births": self.total_births,
            "total_deaths": self.total_deaths,
            "mean_genes": dict(self.mean_genes),
        }


class Simulation:
    """Owns one world: its random source, slimes and food.

    Attributes:
        settings: Validated simulation settings
        rng: Random source shared by every component of this world
        slime_manager: Slime population
        food_manager: Food supply
        sink: Receives entity notifications
        elapsed_ms: Simulated time since :meth:`start`
    """

    def __init__(
        self,
        settings: Optional[Union[SimulationSettings, Mapping[str, Any]]] = None,
        sink: Optional[PresentationSink] = None,
        rng: Optional[SeededRandom] = None,
    ) -> None:
        """Initialize the simulation.

        Args:
            settings: SimulationSettings or an equivalent mapping
            sink: Presentation sink (notifications are dropped if None)
            rng: Random source; seeded from ``settings.seed`` if None

        Raises:
            ConfigurationError: If the settings are invalid
        """
        self.settings: SimulationSettings = coerce_config(
            settings, SimulationSettings, "simulation settings"
        )
        self.rng = rng if rng is not None else SeededRandom(self.settings.seed)
        self.sink: PresentationSink = sink if sink is not None else NullPresentationSink()

        bounds = self.settings.bounds
        self.slime_manager = SlimeManager(self.rng, self.settings.slimes, bounds)
        self.food_manager = FoodManager(self.rng, self.settings.food, bounds)

        self.elapsed_ms = 0.0
        self.total_births = 0
        self.total_deaths = 0
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        """Create the initial slimes, then the initial food."""
        self.elapsed_ms = 0.0
        self.total_births = 0
        self.total_deaths = 0

        for slime in self.slime_manager.initialize():
            self.sink.entity_created(slime)
        for food in self.food_manager.initialize():
            self.sink.entity_created(food)

        self._started = True
        logger.info(
            "Simulation started (seed=%r): %d slimes, %d food",
            self.rng.seed_string,
            self.slime_manager.get_count(),
            self.food_manager.get_food_count(),
        )

    def tick(self, elapsed_ms: float) -> TickReport:
        """Advance the whole world by *elapsed_ms* simulated milliseconds.

        Order: every slime in population order, then slime spawns, then
        food spawns. Entities spawned during a tick are first updated on
        the next one.

        Raises:
            SimulationError: If called before :meth:`start`
        """
        if not self._started:
            raise SimulationError("Simulation.tick() called before start()")

        report = TickReport()

        for slime in self.slime_manager.get_slimes():
            result = slime.tick(elapsed_ms)
            if result is SlimeUpdateResult.REMOVED:
                self.slime_manager.remove_slime(slime)
                report.removed.append(slime)
                self.sink.entity_removed(slime)
                continue
            if result is SlimeUpdateResult.JUST_DIED:
                self.total_deaths += 1
                report.died.append(slime)
            slime.advance_position(elapsed_ms)
            self.sink.entity_changed(slime)

        report.spawned_slimes = self.slime_manager.update(elapsed_ms)
        for slime in report.spawned_slimes:
            self.sink.entity_created(slime)
        report.spawned_food = self.food_manager.update(elapsed_ms)
        for food in report.spawned_food:
            self.sink.entity_created(food)

        self.elapsed_ms += elapsed_ms
        return report

    def handle_contact(self, slime: Slime, food: Food) -> float:
        """Resolve a slime touching a food item.

        Eaten food leaves the food manager and is reported removed.

        Returns:
            Energy the slime gained
        """
        gained = slime.on_resource_contact(food)
        if food.is_consumed:
            if self.food_manager.remove_food(food):
                self.sink.entity_removed(food)
        if gained:
            self.sink.entity_changed(slime)
        return gained

    def breed(self, parent1: Slime, parent2: Slime) -> Optional[Slime]:
        """Add an offspring of two slimes to the population.

        Returns:
            The child, or None if the population is full
        """
        if self.slime_manager.get_population() >= self.slime_manager.config.max_population:
            logger.debug("Breeding skipped: population full")
            return None
        child = parent1.reproduce(parent2, rng=self.rng)
        self.slime_manager.add_slime(child)
        self.total_births += 1
        self.sink.entity_created(child)
        logger.debug(
            "Slime %d born to %d and %d", child.slime_id, parent1.slime_id, parent2.slime_id
        )
        return child

    def stats(self) -> SimulationStats:
        """Current population figures and mean gene values of living slimes."""
        living = [slime for slime in self.slime_manager.get_slimes() if slime.is_alive]
        mean_genes: Dict[str, float] = {}
        if living:
            for name in GENE_NAMES:
                mean_genes[name] = sum(s.genome.get_gene_value(name) for s in living) / len(living)
        return SimulationStats(
            elapsed_ms=self.elapsed_ms,
            population=self.slime_manager.get_population(),
            max_population=self.slime_manager.config.max_population,
            food_count=self.food_manager.get_food_count(),
            max_food=self.food_manager.config.max_count,
            total_births=self.total_births,
            total_deaths=self.total_deaths,
            mean_genes=mean_genes,
        )

    def save_state(self) -> Dict[str, Any]:
        """Capture what a replay needs: RNG state and every slime's genome."""
        seed_string, rng_state = self.rng.getstate()
        return {
            "seed": seed_string,
            "rng_state": rng_state,
            "elapsed_ms": self.elapsed_ms,
            "genomes": [
                {"slime_id": slime.slime_id, "genome": slime.genome.to_dict()}
                for slime in self.slime_manager.get_slimes()
            ],
        }

"""Slime ecosystem micro-simulation core.

Slimes carry a small genome, wander, eat food, starve and breed. Hosts
drive a :class:`Simulation` with ticks and contact reports and render the
state it exposes.
"""

from slimesim.config import FoodConfig, SimulationSettings, SpawnConfig, WorldBounds
from slimesim.energy import EnergyComponent, HungerState
from slimesim.entities import (
    Direction,
    Food,
    FoodType,
    LifeState,
    MovementMode,
    Slime,
    SlimeUpdateResult,
)
from slimesim.exceptions import (
    ConfigurationError,
    EntityError,
    GeneticsError,
    SimulationError,
    SlimeSimError,
)
from slimesim.genetics import Gene, Genome
from slimesim.interfaces import NullPresentationSink, PresentationSink
from slimesim.managers import FoodManager, SlimeManager
from slimesim.simulation import Simulation, SimulationStats, TickReport
from slimesim.util.rng import SeededRandom

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Direction",
    "EnergyComponent",
    "EntityError",
    "Food",
    "FoodConfig",
    "FoodManager",
    "FoodType",
    "Gene",
    "GeneticsError",
    "Genome",
    "HungerState",
    "LifeState",
    "MovementMode",
    "NullPresentationSink",
    "PresentationSink",
    "SeededRandom",
    "Simulation",
    "SimulationError",
    "SimulationSettings",
    "SimulationStats",
    "Slime",
    "SlimeManager",
    "SlimeSimError",
    "SlimeUpdateResult",
    "SpawnConfig",
    "TickReport",
    "WorldBounds",
]

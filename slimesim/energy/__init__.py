"""Energy accounting and hunger classification."""

from slimesim.energy.energy_component import EnergyComponent
from slimesim.energy.hunger import HungerState, classify_hunger

__all__ = ["EnergyComponent", "HungerState", "classify_hunger"]

"""Energy management component for slimes.

This module provides the EnergyComponent class which handles all
energy-related bookkeeping for a slime: the metabolic drain, the extra cost
of moving and sprinting, and gains from food. Keeping it apart from the
Slime class keeps the numbers testable without a world.
"""

from typing import Dict

from slimesim.config.slime import (
    ENERGY_DECREASE_RATE,
    INITIAL_ENERGY,
    MAX_ENERGY,
    MOVEMENT_ENERGY_FACTOR,
    SPRINT_ENERGY_MULTIPLIER,
    SPRINT_MIN_ENERGY_RATIO,
)
from slimesim.energy.hunger import HungerState, classify_hunger
from slimesim.exceptions import EntityError


class EnergyComponent:
    """Manages slime energy and metabolism.

    Attributes:
        energy: Current energy level (0..max_energy)
        max_energy: Maximum energy capacity
        decrease_rate: Energy lost per simulated millisecond at rest
    """

    __slots__ = ("energy", "max_energy", "decrease_rate")

    def __init__(
        self,
        max_energy: float = MAX_ENERGY,
        initial_energy: float = INITIAL_ENERGY,
        decrease_rate: float = ENERGY_DECREASE_RATE,
    ) -> None:
        """Initialize the energy component.

        Args:
            max_energy: Maximum energy capacity
            initial_energy: Starting energy (clamped into 0..max_energy)
            decrease_rate: Energy lost per ms just for being alive
        """
        if max_energy <= 0:
            raise EntityError(f"max_energy must be positive, got {max_energy}")
        if decrease_rate < 0:
            raise EntityError(f"decrease_rate must not be negative, got {decrease_rate}")
        self.max_energy = max_energy
        self.decrease_rate = decrease_rate
        self.energy = max(0.0, min(max_energy, initial_energy))

    def consume_energy(
        self,
        elapsed_ms: float,
        *,
        moving: bool,
        speed_gene: float,
        sprinting: bool = False,
    ) -> Dict[str, float]:
        """Drain energy for one tick.

        Energy consumption includes:
        - Existence cost: ``rate * dt``, always paid
        - Movement cost: ``rate * dt * speed * 0.5`` while moving, times 2.5
          while sprinting

        Args:
            elapsed_ms: Simulated milliseconds since the last tick
            moving: Whether the slime is moving
            speed_gene: The slime's speed gene value
            sprinting: Whether sprint mode is active

        Returns:
            Cost breakdown with ``total``, ``existence`` and ``movement`` keys
        """
        existence_cost = self.decrease_rate * elapsed_ms
        movement_cost = 0.0
        if moving:
            multiplier = speed_gene * MOVEMENT_ENERGY_FACTOR
            if sprinting:
                multiplier *= SPRINT_ENERGY_MULTIPLIER
            movement_cost = self.decrease_rate * elapsed_ms * multiplier

        self.energy -= existence_cost
        self.energy -= movement_cost
        self.energy = max(0.0, self.energy)

        return {
            "total": existence_cost + movement_cost,
            "existence": existence_cost,
            "movement": movement_cost,
        }

    def gain_energy(self, amount: float) -> float:
        """Gain energy from food, capped at max_energy.

        Returns:
            The energy actually added
        """
        before = self.energy
        self.energy = min(self.max_energy, self.energy + amount)
        return self.energy - before

    def get_energy_ratio(self) -> float:
        """Get current energy as a ratio of maximum energy (0.0-1.0)."""
        return self.energy / self.max_energy

    @property
    def hunger_state(self) -> HungerState:
        return classify_hunger(self.get_energy_ratio())

    def can_sprint(self) -> bool:
        """Sprinting needs at least 20% of max energy."""
        return self.energy >= self.max_energy * SPRINT_MIN_ENERGY_RATIO

    def is_depleted(self) -> bool:
        return self.energy == 0.0

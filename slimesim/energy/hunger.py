"""Hunger state classification.

Hunger is derived from the energy ratio and never set directly. Thresholds
are inclusive: a slime at exactly 30% is already hungry.
"""

from enum import Enum

from slimesim.config.slime import HUNGRY_THRESHOLD_RATIO, STARVING_THRESHOLD_RATIO


class HungerState(Enum):
    """How desperate a slime is for food."""

    SATISFIED = "satisfied"
    HUNGRY = "hungry"
    STARVING = "starving"


def classify_hunger(energy_ratio: float) -> HungerState:
    """Map an energy ratio (0.0-1.0) to a hunger state."""
    if energy_ratio <= STARVING_THRESHOLD_RATIO:
        return HungerState.STARVING
    if energy_ratio <= HUNGRY_THRESHOLD_RATIO:
        return HungerState.HUNGRY
    return HungerState.SATISFIED

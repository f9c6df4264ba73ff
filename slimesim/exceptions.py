"""Slime simulation exception hierarchy.

Centralised base classes so callers can catch simulation failures without
resorting to bare ``except Exception`` blocks.
"""


class SlimeSimError(Exception):
    """Root of all slimesim domain exceptions."""


class SimulationError(SlimeSimError):
    """Errors during simulation execution (managers, entities, driver)."""


class EntityError(SimulationError):
    """An entity-level failure (energy, lifecycle, movement)."""


class GeneticsError(SimulationError):
    """Genome encoding, decoding, or combination failure."""


class ConfigurationError(SlimeSimError):
    """Invalid or missing configuration."""

"""Centralized math utilities for the simulation.

This module provides a small pure Python Vector2 used for positions and
velocities. The host engine keeps its own vector types; these only carry the
simulation's intent across the boundary.
"""

from __future__ import annotations

import math


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def distance_to(self, other: "Vector2") -> float:
        """Euclidean distance between two points."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def update(self, x: float, y: float) -> None:
        """Set both components in-place."""
        self.x = float(x)
        self.y = float(y)

    def translate(self, offset: "Vector2") -> None:
        """Move this point by *offset* in-place."""
        self.x += offset.x
        self.y += offset.y

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """Exact component equality (determinism checks rely on it)."""
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


__all__ = ["Vector2"]

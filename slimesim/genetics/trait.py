"""Gene definitions and the declarative gene table.

This module provides:
- GeneSpec: Declarative specification for a gene's distribution and bounds
- Gene: An immutable gene value clamped into its bounds
- GENE_SPECS: The closed, ordered set of genes every genome carries
"""

import math
from dataclasses import dataclass
from typing import Dict, List

from slimesim.exceptions import GeneticsError
from slimesim.util.rng import SeededRandom


@dataclass(frozen=True)
class Gene:
    """One named trait with a bounded numeric value.

    The value is clamped into ``[min_val, max_val]`` on construction, so
    ``min_val <= value <= max_val`` always holds.

    Attributes:
        name: Gene name (snake_case key in the genome)
        value: Current trait value
        min_val: Minimum allowed value
        max_val: Maximum allowed value
    """

    name: str
    value: float
    min_val: float
    max_val: float

    def __post_init__(self) -> None:
        value = float(self.value)
        if not math.isfinite(value):
            raise GeneticsError(f"Gene {self.name!r}: value {self.value!r} is not finite")
        if self.min_val > self.max_val:
            raise GeneticsError(
                f"Gene {self.name!r}: min {self.min_val} exceeds max {self.max_val}"
            )
        object.__setattr__(self, "value", max(self.min_val, min(self.max_val, value)))

    @property
    def span(self) -> float:
        return self.max_val - self.min_val

    def with_value(self, value: float) -> "Gene":
        """Return a copy carrying *value* (clamped)."""
        return Gene(self.name, value, self.min_val, self.max_val)


@dataclass(frozen=True)
class GeneSpec:
    """Declarative definition of a gene.

    Attributes:
        name: Attribute name on the genome
        label: Human-readable name
        mean: Mean of the founding-population distribution
        std_dev: Standard deviation of that distribution
        min_val: Minimum allowed value
        max_val: Maximum allowed value
    """

    name: str
    label: str
    mean: float
    std_dev: float
    min_val: float
    max_val: float

    def random_value(self, rng: SeededRandom) -> float:
        """Draw a founding value (normal, clamped into bounds)."""
        return rng.normal(self.mean, self.std_dev, self.min_val, self.max_val)

    def make(self, value: float) -> Gene:
        return Gene(self.name, value, self.min_val, self.max_val)

    def random_gene(self, rng: SeededRandom) -> Gene:
        return self.make(self.random_value(rng))


# Order matters: random creation and combination draw genes in this order
GENE_SPECS: List[GeneSpec] = [
    GeneSpec("speed", "Speed", 0.5, 0.3, 0.1, 1.5),
    GeneSpec("size", "Size", 1.0, 0.3, 0.5, 2.0),
    GeneSpec("energy_efficiency", "Energy Efficiency", 1.0, 0.2, 0.5, 1.5),
    GeneSpec("color", "Color", 0.5, 0.5, 0.0, 1.0),
    GeneSpec("sense_radius", "Sense Radius", 100.0, 30.0, 50.0, 200.0),
]

GENE_SPECS_BY_NAME: Dict[str, GeneSpec] = {spec.name: spec for spec in GENE_SPECS}
GENE_NAMES: List[str] = [spec.name for spec in GENE_SPECS]


def get_gene_spec(name: str) -> GeneSpec:
    """Look up a gene spec by name.

    Raises:
        GeneticsError: If the name is not part of the genome
    """
    try:
        return GENE_SPECS_BY_NAME[name]
    except KeyError:
        raise GeneticsError(f"Unknown gene {name!r}; expected one of {GENE_NAMES}") from None

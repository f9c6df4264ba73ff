"""Genome class for the slime simulation.

This module provides the Genome value object: the fixed set of heritable
traits a slime carries. Genomes never change after construction;
reproduction builds a new one from two parents.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from slimesim.color import gene_to_rgb
from slimesim.config.slime import DEFAULT_MUTATION_RATE
from slimesim.exceptions import GeneticsError
from slimesim.genetics.genome_codec import (
    gene_values_from_dict,
    genome_to_dict,
    genome_to_json,
    json_to_mapping,
)
from slimesim.genetics.trait import GENE_SPECS, Gene, get_gene_spec
from slimesim.util.rng import SeededRandom, require_rng_param

logger = logging.getLogger(__name__)

# Mutation shifts a gene by up to 10% of its range in either direction
_MUTATION_RANGE_FRACTION = 0.1


@dataclass(frozen=True)
class Genome:
    """Represents the complete genetic makeup of a slime.

    Attributes:
        speed: Movement speed multiplier
        size: Body scale
        energy_efficiency: Multiplier on energy gained from food
        color: Hue position (0-1) used for display color
        sense_radius: Perception radius (carried and inherited, not yet used by behavior)
    """

    speed: Gene
    size: Gene
    energy_efficiency: Gene
    color: Gene
    sense_radius: Gene

    def __post_init__(self) -> None:
        for f in fields(self):
            gene = getattr(self, f.name)
            if not isinstance(gene, Gene) or gene.name != f.name:
                raise GeneticsError(f"Genome field {f.name!r} must hold a Gene named {f.name!r}")

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def random(cls, rng: SeededRandom) -> "Genome":
        """Create a random genome (one clamped normal draw per gene, in table order)."""
        rng = require_rng_param(rng, "Genome.random")
        return cls(**{spec.name: spec.random_gene(rng) for spec in GENE_SPECS})

    @classmethod
    def from_values(cls, rng: Optional[SeededRandom] = None, **values: float) -> "Genome":
        """Create a genome from explicit gene values.

        Supplied values are clamped into bounds. Genes that are not supplied
        are drawn at random, which needs *rng*.

        Raises:
            GeneticsError: On unknown gene names, or missing genes without an rng
        """
        for name in values:
            get_gene_spec(name)

        genes: Dict[str, Gene] = {}
        for spec in GENE_SPECS:
            if spec.name in values:
                genes[spec.name] = spec.make(values[spec.name])
            elif rng is None:
                raise GeneticsError(
                    f"Gene {spec.name!r} not supplied and no rng given to draw it"
                )
            else:
                genes[spec.name] = spec.random_gene(rng)
        return cls(**genes)

    @classmethod
    def combine(
        cls,
        parent1: "Genome",
        parent2: "Genome",
        *,
        rng: SeededRandom,
        mutation_rate: float = DEFAULT_MUTATION_RATE,
    ) -> "Genome":
        """Create offspring by choosing a parent per gene, then maybe mutating.

        For each gene in table order: one draw picks the parent (50/50), one
        draw decides mutation, and a mutating gene takes a third draw for
        the shift, ``span * 0.1 * (u * 2 - 1)``, clamped back into bounds.

        Args:
            parent1: First parent genome
            parent2: Second parent genome
            rng: Simulation random source
            mutation_rate: Per-gene mutation probability (0.0-1.0)

        Returns:
            A new genome; neither parent is modified
        """
        rng = require_rng_param(rng, "Genome.combine")
        if not 0.0 <= mutation_rate <= 1.0:
            raise GeneticsError(f"mutation_rate must be within [0, 1], got {mutation_rate}")

        child: Dict[str, Gene] = {}
        for spec in GENE_SPECS:
            gene1 = getattr(parent1, spec.name)
            gene2 = getattr(parent2, spec.name)
            inherited = gene1 if rng.random() < 0.5 else gene2

            value = inherited.value
            if rng.random() < mutation_rate:
                shift = inherited.span * _MUTATION_RANGE_FRACTION * (rng.random() * 2 - 1)
                value += shift
            child[spec.name] = inherited.with_value(value)
        return cls(**child)

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_gene(self, name: str) -> Gene:
        """Get a gene by name."""
        get_gene_spec(name)
        return getattr(self, name)

    def get_gene_value(self, name: str) -> float:
        """Get a gene value by name."""
        return self.get_gene(name).value

    def genes(self) -> Iterator[Gene]:
        """Iterate over genes in table order."""
        for spec in GENE_SPECS:
            yield getattr(self, spec.name)

    def values(self) -> Dict[str, float]:
        """Map gene name to value."""
        return {gene.name: gene.value for gene in self.genes()}

    def color_rgb(self) -> Tuple[int, int, int]:
        """Display color derived from the color gene (HSL, s=1.0, l=0.7)."""
        return gene_to_rgb(self.color.value)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Serialize this genome into JSON-compatible primitives.

        This is intended as a stable boundary format for persistence.
        """
        return genome_to_dict(self)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        rng: Optional[SeededRandom] = None,
    ) -> "Genome":
        """Deserialize a genome produced by :meth:`to_dict`.

        Missing genes are drawn at random when *rng* is given.
        """
        return cls.from_values(rng, **gene_values_from_dict(data))

    def to_json(self) -> str:
        return genome_to_json(self)

    @classmethod
    def from_json(
        cls,
        text: Union[str, bytes],
        *,
        rng: Optional[SeededRandom] = None,
    ) -> "Genome":
        return cls.from_dict(json_to_mapping(text), rng=rng)

    def debug_snapshot(self) -> Dict[str, Any]:
        """Return a compact, stable dict for logging/debugging."""
        snapshot: Dict[str, Any] = {name: round(value, 4) for name, value in self.values().items()}
        snapshot["rgb"] = self.color_rgb()
        return snapshot

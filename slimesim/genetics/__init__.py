"""Genetics package for the slime simulation.

- Declarative gene specifications (GeneSpec, GENE_SPECS)
- Immutable genome value objects with sexual combination and mutation
- A plain-mapping/JSON codec for persistence
"""

from slimesim.genetics.genome import Genome
from slimesim.genetics.genome_codec import LEGACY_GENE_NAMES, genome_to_dict
from slimesim.genetics.trait import (
    GENE_NAMES,
    GENE_SPECS,
    Gene,
    GeneSpec,
    get_gene_spec,
)

__all__ = [
    "Genome",
    "Gene",
    "GeneSpec",
    "GENE_SPECS",
    "GENE_NAMES",
    "LEGACY_GENE_NAMES",
    "get_gene_spec",
    "genome_to_dict",
]

"""Genome serialization/deserialization helpers.

This module is the persistence boundary for `slimesim.genetics.genome.Genome`.
The wire shape is a plain mapping of gene name to ``{"value", "min", "max"}``.
Float values are written untouched, so a save/load cycle reproduces every
gene bit for bit.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping, Union

import orjson

from slimesim.exceptions import GeneticsError
from slimesim.genetics.trait import GENE_SPECS, GENE_SPECS_BY_NAME

logger = logging.getLogger(__name__)

# Older saves used camelCase gene keys
LEGACY_GENE_NAMES: Dict[str, str] = {
    "energyEfficiency": "energy_efficiency",
    "senseRadius": "sense_radius",
}


def genome_to_dict(genome: Any) -> Dict[str, Dict[str, float]]:
    """Serialize a genome into JSON-compatible primitives."""
    out: Dict[str, Dict[str, float]] = {}
    for spec in GENE_SPECS:
        gene = getattr(genome, spec.name)
        out[spec.name] = {
            "value": gene.value,
            "min": gene.min_val,
            "max": gene.max_val,
        }
    return out


def gene_values_from_dict(data: Mapping[str, Any]) -> Dict[str, float]:
    """Extract gene values from a serialized genome mapping.

    Accepts an optional ``{"genes": {...}}`` wrapper and legacy camelCase
    gene names. Unknown keys are ignored; missing genes are simply absent
    from the result. Bounds stored in the data are not trusted: the caller
    re-applies the canonical bounds.

    Raises:
        GeneticsError: If the data is not a mapping or a value is not numeric
    """
    if not isinstance(data, Mapping):
        raise GeneticsError(f"Genome data must be a mapping, got {type(data).__name__}")
    genes = data.get("genes", data)
    if not isinstance(genes, Mapping):
        raise GeneticsError(f"Genome 'genes' must be a mapping, got {type(genes).__name__}")

    values: Dict[str, float] = {}
    for key, raw in genes.items():
        name = LEGACY_GENE_NAMES.get(key, key)
        spec = GENE_SPECS_BY_NAME.get(name)
        if spec is None:
            logger.debug("Ignoring unknown gene %r in genome data", key)
            continue
        raw_value = raw.get("value") if isinstance(raw, Mapping) else raw
        if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
            raise GeneticsError(f"Gene {name!r}: expected a number, got {raw_value!r}")
        value = float(raw_value)
        if not math.isfinite(value):
            raise GeneticsError(f"Gene {name!r}: value {raw_value!r} is not finite")
        if isinstance(raw, Mapping) and (
            raw.get("min", spec.min_val) != spec.min_val
            or raw.get("max", spec.max_val) != spec.max_val
        ):
            logger.debug("Gene %r: stored bounds differ from canonical bounds; using canonical", name)
        values[name] = value
    return values


def genome_to_json(genome: Any) -> str:
    """Encode a genome as a JSON string."""
    return orjson.dumps(genome_to_dict(genome)).decode("utf-8")


def json_to_mapping(text: Union[str, bytes]) -> Dict[str, Any]:
    """Decode a JSON genome document.

    Raises:
        GeneticsError: If the text is not valid JSON
    """
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise GeneticsError(f"Genome JSON could not be decoded: {e}") from e

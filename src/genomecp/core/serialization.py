"""Record serialization for genomecp tool responses.

Converts records into JSON-compatible dicts using the field names the genome
viewer expects (``sourceName``, ``actualRange``, ``geneBounds``, ...).
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from ..models import (
    Chromosome,
    ClinvarVariant,
    GeneDetails,
    GeneDetailsResult,
    GeneSearchResponse,
    GenomeAssembly,
    SequenceResult,
)


def serialize_genomes(genomes: dict[str, list[GenomeAssembly]]) -> dict:
    return {
        "genomes": {
            organism: [
                {
                    "id": g.id,
                    "name": g.name,
                    "sourceName": g.source_name,
                    "active": g.active,
                }
                for g in assemblies
            ]
            for organism, assemblies in genomes.items()
        }
    }


def serialize_chromosomes(chromosomes: list[Chromosome]) -> dict:
    return {"chromosomes": [asdict(c) for c in chromosomes]}


def serialize_gene_search(response: GeneSearchResponse) -> dict:
    return {
        "query": response.query,
        "genome": response.genome,
        "results": [asdict(r) for r in response.results],
    }


def _serialize_gene_details(details: GeneDetails) -> dict:
    """Serialize gene details, omitting optional fields that are absent."""
    genomicinfo = []
    for info in details.genomicinfo:
        entry: dict[str, Any] = {"chrstart": info.chrstart, "chrstop": info.chrstop}
        if info.strand is not None:
            entry["strand"] = info.strand
        genomicinfo.append(entry)

    d: dict[str, Any] = {"genomicinfo": genomicinfo}
    if details.summary is not None:
        d["summary"] = details.summary
    if details.organism is not None:
        d["organism"] = asdict(details.organism)
    return d


def serialize_gene_details(result: GeneDetailsResult) -> dict:
    return {
        "geneDetails": (
            _serialize_gene_details(result.gene_details) if result.gene_details else None
        ),
        "geneBounds": asdict(result.gene_bounds) if result.gene_bounds else None,
        "initialRange": asdict(result.initial_range) if result.initial_range else None,
    }


def serialize_sequence(result: SequenceResult) -> dict:
    d: dict[str, Any] = {
        "sequence": result.sequence,
        "actualRange": asdict(result.actual_range),
    }
    if result.error is not None:
        d["error"] = result.error
    return d


def serialize_variants(variants: list[ClinvarVariant]) -> dict:
    return {"variants": [asdict(v) for v in variants], "count": len(variants)}

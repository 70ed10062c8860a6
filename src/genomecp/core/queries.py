"""Query builders for outgoing upstream requests."""

from __future__ import annotations

import re

from ..constants import (
    CLINVAR_GRCH37_GENOME,
    CLINVAR_MAX_RESULTS,
    CLINVAR_POSITION_FIELD_GRCH37,
    CLINVAR_POSITION_FIELD_GRCH38,
    GENE_SEARCH_DISPLAY_FIELDS,
    GENE_SEARCH_EXTRA_FIELDS,
)
from ..models import GeneBounds

_CHR_PREFIX = re.compile(r"^chr", re.IGNORECASE)


def with_chr_prefix(chrom: str) -> str:
    """UCSC-style chromosome name (``"17"`` -> ``"chr17"``)."""
    return chrom if chrom.startswith("chr") else f"chr{chrom}"


def strip_chr_prefix(chrom: str) -> str:
    """NCBI-style chromosome name, case-insensitive (``"CHR17"`` -> ``"17"``)."""
    return _CHR_PREFIX.sub("", chrom)


def gene_search_params(query: str) -> dict[str, str]:
    return {
        "terms": query,
        "df": ",".join(GENE_SEARCH_DISPLAY_FIELDS),
        "ef": ",".join(GENE_SEARCH_EXTRA_FIELDS),
    }


def gene_summary_params(gene_id: str) -> dict[str, str]:
    return {"db": "gene", "id": gene_id, "retmode": "json"}


def sequence_params(chrom: str, start: int, end: int, genome_id: str) -> dict[str, str | int]:
    """Parameters for the UCSC sequence endpoint.

    ``start``/``end`` are 1-based inclusive; UCSC expects a 0-based half-open
    window, so ``[start, end]`` is sent as ``[start - 1, end)``.
    """
    return {
        "genome": genome_id,
        "chrom": with_chr_prefix(chrom),
        "start": start - 1,
        "end": end,
    }


def ordered_bounds(bounds: GeneBounds) -> tuple[int, int]:
    return min(bounds.min, bounds.max), max(bounds.min, bounds.max)


def clinvar_position_field(genome_id: str) -> str:
    if genome_id == CLINVAR_GRCH37_GENOME:
        return CLINVAR_POSITION_FIELD_GRCH37
    return CLINVAR_POSITION_FIELD_GRCH38


def build_clinvar_search_term(chrom: str, bounds: GeneBounds, genome_id: str) -> str:
    """Build a ClinVar search term for every variant inside a coordinate span."""
    low, high = ordered_bounds(bounds)
    position_field = clinvar_position_field(genome_id)
    return f"{strip_chr_prefix(chrom)}[chromosome] AND {low}:{high}[{position_field}]"


def clinvar_search_params(term: str) -> dict[str, str | int]:
    return {
        "db": "clinvar",
        "term": term,
        "retmode": "json",
        "retmax": CLINVAR_MAX_RESULTS,
    }


def clinvar_summary_params(ids: list[str]) -> dict[str, str]:
    return {"db": "clinvar", "id": ",".join(ids), "retmode": "json"}


def variant_analysis_body(
    position: int, alternative: str, genome_id: str, chromosome: str
) -> dict[str, str | int]:
    return {
        "variant_position": position,
        "alternative": alternative,
        "genome": genome_id,
        "chromosome": chromosome,
    }

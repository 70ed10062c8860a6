"""Input validation for genomecp tool handlers.

Provides validation for genome identifiers, gene ids, chromosome names,
coordinate ranges and alleles.
"""

from __future__ import annotations

import re

# UCSC genome ids (hg38, mm39, GCF_000001405.40, ...)
GENOME_ID_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]{1,64}$")

# NCBI Gene ids are positive integers
GENE_ID_PATTERN = re.compile(r"^\d{1,12}$")

# Chromosome names, chr prefix optional (chr1, 17, chrX, chrM, chr6_GL000250v2_alt)
CHROM_PATTERN = re.compile(r"^(chr)?[A-Za-z0-9_.\-]{1,64}$", re.IGNORECASE)

# Pattern for valid allele strings (only ACGTN)
ALLELE_PATTERN = re.compile(r"^[ACGTN]+$", re.IGNORECASE)

# Input length limits
MAX_QUERY_LENGTH = 200
MAX_SEQUENCE_SPAN = 1_000_000


def validate_genome_id(genome_id: str) -> None:
    """Validate a UCSC genome identifier.

    Raises:
        ValueError: If the identifier is empty or contains unexpected characters.
    """
    if not GENOME_ID_PATTERN.match(genome_id):
        raise ValueError(f"Invalid genome id: '{genome_id}'")


def validate_gene_id(gene_id: str) -> None:
    if not GENE_ID_PATTERN.match(gene_id):
        raise ValueError(f"Invalid NCBI gene id: '{gene_id}'")


def validate_chromosome(chrom: str) -> None:
    if not CHROM_PATTERN.match(chrom):
        raise ValueError(f"Invalid chromosome: '{chrom}'")


def validate_query(query: str) -> None:
    stripped = query.strip()
    if not stripped:
        raise ValueError("Search query must not be empty")
    if len(stripped) > MAX_QUERY_LENGTH:
        raise ValueError(f"Search query too long (max {MAX_QUERY_LENGTH} characters)")


def validate_range(start: int, end: int, max_span: int | None = MAX_SEQUENCE_SPAN) -> None:
    """Validate a 1-based inclusive coordinate range.

    Args:
        start: First base, at least 1.
        end: Last base, not before ``start``.
        max_span: Largest allowed number of bases, or None for no limit.

    Raises:
        ValueError: If the range is malformed or too large.
    """
    if start < 1:
        raise ValueError(f"Start must be at least 1, got {start}")
    if end < start:
        raise ValueError(f"End ({end}) must not be before start ({start})")
    if max_span is not None and end - start + 1 > max_span:
        raise ValueError(f"Range too large (max {max_span:,} bases)")


def validate_variant_input(
    position: int, alternative: str, genome_id: str, chromosome: str
) -> str | None:
    """Validate variant analysis input parameters.

    Returns:
        Error message if validation fails, None if valid.
    """
    if not CHROM_PATTERN.match(chromosome):
        return f"Invalid chromosome: {chromosome}"
    if not GENOME_ID_PATTERN.match(genome_id):
        return f"Invalid genome id: {genome_id}"
    if position < 1:
        return f"Position must be positive, got {position}"
    if not ALLELE_PATTERN.match(alternative):
        return f"Invalid alternative allele: {alternative}"
    return None

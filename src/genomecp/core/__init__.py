"""Core normalization, ordering, query building and validation modules.

Tool handlers live in ``genomecp.core.tools`` and are not re-exported here,
since they import the clients, which import this package.
"""

from .normalize import (
    group_genomes,
    parse_chromosomes,
    parse_clinvar_summaries,
    parse_gene_details,
    parse_gene_search,
    parse_sequence,
)
from .ordering import compare_chromosomes, initial_view_range, title_case_words
from .serialization import serialize_gene_details, serialize_sequence
from .validation import (
    validate_chromosome,
    validate_genome_id,
    validate_range,
    validate_variant_input,
)

__all__ = [
    "compare_chromosomes",
    "group_genomes",
    "initial_view_range",
    "parse_chromosomes",
    "parse_clinvar_summaries",
    "parse_gene_details",
    "parse_gene_search",
    "parse_sequence",
    "serialize_gene_details",
    "serialize_sequence",
    "title_case_words",
    "validate_chromosome",
    "validate_genome_id",
    "validate_range",
    "validate_variant_input",
]

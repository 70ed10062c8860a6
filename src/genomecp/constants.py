"""Shared constants for genomecp upstream endpoints, defaults and thresholds.

This module is the single source of truth for default values that are consumed
across configuration loading, query building, and response normalization.
"""

from __future__ import annotations

# Networking defaults
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8000
DEFAULT_TRANSPORT = "stdio"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"

# Upstream endpoints
UCSC_API_BASE = "https://api.genome.ucsc.edu/"
EUTILS_BASE = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/"
GENE_SEARCH_URL = "https://clinicaltables.nlm.nih.gov/api/ncbi_genes/v3/search"

# Gene search field lists (display fields and extra fields)
GENE_SEARCH_DISPLAY_FIELDS = ("chromosome", "Symbol", "description", "map_location", "type_of_gene")
GENE_SEARCH_EXTRA_FIELDS = GENE_SEARCH_DISPLAY_FIELDS + ("GenomicInfo", "GeneID")
GENE_SEARCH_MAX_RESULTS = 10

# Default viewer window for a gene, anchored at its lower bound
GENE_VIEW_WINDOW = 10_000

# Chromosome names containing any of these are scaffolds/unplaced contigs
EXCLUDED_CHROMOSOME_MARKERS = ("_", "Un", "random")

# Genome catalog grouping
DEFAULT_ORGANISM = "Other"

# ClinVar
CLINVAR_MAX_RESULTS = 20
CLINVAR_GRCH37_GENOME = "hg19"
CLINVAR_POSITION_FIELD_GRCH37 = "chrpos37"
CLINVAR_POSITION_FIELD_GRCH38 = "chrpos38"
UNKNOWN = "Unknown"

# Sequence fetch
SEQUENCE_FETCH_FAILED = "Internal error in fetch gene sequence"
SEQUENCE_MISSING_DNA = "No sequence data returned"

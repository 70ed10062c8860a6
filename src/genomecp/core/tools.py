"""MCP tool handlers for genomecp."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from ..clients.analysis import VariantAnalysisClient
from ..clients.clinvar import ClinVarClient
from ..clients.genes import GeneClient
from ..clients.ucsc import UCSCClient
from ..config import GenomeCPConfig
from ..errors import GenomeCPError
from ..models import GeneBounds
from .serialization import (
    serialize_chromosomes,
    serialize_gene_details,
    serialize_gene_search,
    serialize_genomes,
    serialize_sequence,
    serialize_variants,
)
from .validation import (
    validate_chromosome,
    validate_gene_id,
    validate_genome_id,
    validate_query,
    validate_range,
    validate_variant_input,
)

logger = logging.getLogger(__name__)

# Module-level singleton instances, built from the first config seen
_ucsc_client: UCSCClient | None = None
_gene_client: GeneClient | None = None
_clinvar_client: ClinVarClient | None = None
_analysis_client: VariantAnalysisClient | None = None

_CLINVAR_DISCLAIMER = (
    "Note: This is research-grade information from ClinVar and is not intended "
    "for clinical diagnostic use."
)

_ANALYSIS_DISCLAIMER = (
    "Note: Variant effect predictions are computational estimates and are not "
    "intended for clinical diagnostic use."
)

# Expected failures of propagate-policy operations
_UPSTREAM_ERRORS = (httpx.HTTPStatusError, httpx.RequestError, GenomeCPError)


def get_ucsc_client(config: GenomeCPConfig) -> UCSCClient:
    """Get or create the singleton UCSC client."""
    global _ucsc_client
    if _ucsc_client is None:
        _ucsc_client = UCSCClient(base_url=config.ucsc_api_base, timeout=config.timeout)
    return _ucsc_client


def get_gene_client(config: GenomeCPConfig) -> GeneClient:
    """Get or create the singleton gene client."""
    global _gene_client
    if _gene_client is None:
        _gene_client = GeneClient(
            search_url=config.gene_search_url,
            eutils_base=config.eutils_base,
            api_key=config.ncbi_api_key,
            timeout=config.timeout,
        )
    return _gene_client


def get_clinvar_client(config: GenomeCPConfig) -> ClinVarClient:
    """Get or create the singleton ClinVar client."""
    global _clinvar_client
    if _clinvar_client is None:
        _clinvar_client = ClinVarClient(
            api_key=config.ncbi_api_key,
            eutils_base=config.eutils_base,
            timeout=config.timeout,
        )
    return _clinvar_client


def get_analysis_client(config: GenomeCPConfig) -> VariantAnalysisClient:
    """Get or create the singleton variant analysis client."""
    global _analysis_client
    if _analysis_client is None:
        _analysis_client = VariantAnalysisClient(
            url=config.analyze_variant_url, timeout=config.timeout
        )
    return _analysis_client


def _text(payload: dict) -> dict:
    return {"content": [{"type": "text", "text": json.dumps(payload)}]}


# -- Tool Handlers -----------------------------------------------------------


async def handle_list_genomes(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """Return the UCSC genome catalog grouped by organism."""
    client = get_ucsc_client(config)

    try:
        genomes = await client.list_genomes()
    except _UPSTREAM_ERRORS as e:
        logger.warning("Genome catalog lookup failed: %s", e)
        return _text({"error": "Failed to fetch genome list from UCSC API"})

    return _text(serialize_genomes(genomes))


async def handle_list_chromosomes(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """Return the primary chromosomes of a genome in natural order."""
    genome_id = args["genome_id"]
    validate_genome_id(genome_id)

    client = get_ucsc_client(config)

    try:
        chromosomes = await client.list_chromosomes(genome_id)
    except _UPSTREAM_ERRORS as e:
        logger.warning("Chromosome listing failed for %s: %s", genome_id, e)
        return _text({"error": f"Failed to fetch chromosome list for {genome_id}"})

    return _text(serialize_chromosomes(chromosomes))


async def handle_search_genes(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """Search genes by free text."""
    query = args["query"]
    genome = args["genome"]
    validate_query(query)
    validate_genome_id(genome)

    client = get_gene_client(config)

    try:
        response = await client.search(query, genome)
    except _UPSTREAM_ERRORS as e:
        logger.warning("Gene search failed for %r: %s", query, e)
        return _text({"error": "NCBI gene search failed", "query": query, "genome": genome})

    return _text(serialize_gene_search(response))


async def handle_get_gene_details(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """Return gene details, bounds and the default view window.

    A gene that cannot be resolved yields all three fields as null.
    """
    gene_id = args["gene_id"]
    validate_gene_id(gene_id)

    client = get_gene_client(config)
    result = await client.fetch_details(gene_id)
    return _text(serialize_gene_details(result))


async def handle_get_sequence(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """Return the reference sequence for a 1-based inclusive range."""
    chrom = args["chrom"]
    start = args["start"]
    end = args["end"]
    genome_id = args["genome_id"]
    validate_chromosome(chrom)
    validate_range(start, end)
    validate_genome_id(genome_id)

    client = get_ucsc_client(config)
    result = await client.fetch_sequence(chrom, start, end, genome_id)
    return _text(serialize_sequence(result))


async def handle_get_clinvar_variants(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """List ClinVar variants inside a gene span.

    Returns title, variation type, classification and location per variant.
    """
    chrom = args["chrom"]
    genome_id = args["genome_id"]
    validate_chromosome(chrom)
    validate_genome_id(genome_id)
    bounds = GeneBounds(min=args["min_position"], max=args["max_position"])

    client = get_clinvar_client(config)

    try:
        variants = await client.fetch_variants(chrom, bounds, genome_id)
    except _UPSTREAM_ERRORS as e:
        logger.warning(
            "ClinVar variant search failed for %s:%d-%d: %s", chrom, bounds.min, bounds.max, e
        )
        return _text(
            {"error": "ClinVar variant search failed", "disclaimer": _CLINVAR_DISCLAIMER}
        )

    payload = serialize_variants(variants)
    payload["disclaimer"] = _CLINVAR_DISCLAIMER
    return _text(payload)


async def handle_analyze_variant(args: dict[str, Any], config: GenomeCPConfig) -> dict:
    """Score a single-nucleotide variant with the configured scoring service."""
    position = args["position"]
    alternative = args["alternative"]
    genome_id = args["genome_id"]
    chromosome = args["chromosome"]

    validation_error = validate_variant_input(position, alternative, genome_id, chromosome)
    if validation_error:
        return _text({"error": validation_error, "disclaimer": _ANALYSIS_DISCLAIMER})

    client = get_analysis_client(config)

    try:
        result = await client.analyze(position, alternative, genome_id, chromosome)
    except _UPSTREAM_ERRORS as e:
        logger.warning(
            "Variant analysis failed for %s:%d>%s: %s", chromosome, position, alternative, e
        )
        return _text({"error": str(e), "disclaimer": _ANALYSIS_DISCLAIMER})

    if not isinstance(result, dict):
        return _text({"result": result, "disclaimer": _ANALYSIS_DISCLAIMER})

    payload = dict(result)
    payload["disclaimer"] = _ANALYSIS_DISCLAIMER
    return _text(payload)

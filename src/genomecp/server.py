"""MCP server setup for genomecp using FastMCP."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .config import GenomeCPConfig
from .core.tools import (
    handle_analyze_variant,
    handle_get_clinvar_variants,
    handle_get_gene_details,
    handle_get_sequence,
    handle_list_chromosomes,
    handle_list_genomes,
    handle_search_genes,
)


def create_server(config: GenomeCPConfig | None = None) -> FastMCP:
    """Create and configure the genomecp MCP server."""
    if config is None:
        config = GenomeCPConfig.from_env()

    mcp = FastMCP(name="genomecp", host=config.host, port=config.port)

    # -- Tools ---------------------------------------------------------------
    # Thin wrappers delegate to the handlers in core/tools.py.
    # FastMCP derives the JSON-Schema from the function signature.

    @mcp.tool(description="List UCSC genome assemblies grouped by organism")
    async def list_genomes() -> str:
        result = await handle_list_genomes({}, config)
        return str(result["content"][0]["text"])

    @mcp.tool(
        description=(
            "List the primary chromosomes of a UCSC genome (e.g., hg38) with their sizes, "
            "in natural order (chr1, chr2, ..., chr22, then named chromosomes)."
        ),
    )
    async def list_chromosomes(genome_id: str) -> str:
        result = await handle_list_chromosomes({"genome_id": genome_id}, config)
        return str(result["content"][0]["text"])

    @mcp.tool(
        description=(
            "Search genes by symbol or name. Returns up to 10 hits with chromosome "
            "and NCBI gene id."
        ),
    )
    async def search_genes(query: str, genome: str) -> str:
        result = await handle_search_genes({"query": query, "genome": genome}, config)
        return str(result["content"][0]["text"])

    @mcp.tool(
        description=(
            "Get NCBI gene details by gene id, with the gene's coordinate bounds and a "
            "default view window of at most 10,000 bases. Unknown genes return nulls."
        ),
    )
    async def get_gene_details(gene_id: str) -> str:
        result = await handle_get_gene_details({"gene_id": gene_id}, config)
        return str(result["content"][0]["text"])

    @mcp.tool(
        description=(
            "Get the reference DNA sequence for a 1-based inclusive range "
            "(e.g., chr17, 43044295-43045295, hg38)."
        ),
    )
    async def get_sequence(chrom: str, start: int, end: int, genome_id: str) -> str:
        result = await handle_get_sequence(
            {"chrom": chrom, "start": start, "end": end, "genome_id": genome_id},
            config,
        )
        return str(result["content"][0]["text"])

    @mcp.tool(
        description=(
            "List up to 20 ClinVar variants inside a coordinate span, with variation type "
            "and classification. Research-grade information, not for clinical use."
        ),
    )
    async def get_clinvar_variants(
        chrom: str, min_position: int, max_position: int, genome_id: str
    ) -> str:
        result = await handle_get_clinvar_variants(
            {
                "chrom": chrom,
                "min_position": min_position,
                "max_position": max_position,
                "genome_id": genome_id,
            },
            config,
        )
        return str(result["content"][0]["text"])

    @mcp.tool(
        description=(
            "Predict the effect of a single-nucleotide variant with the configured "
            "scoring service. Research-grade information, not for clinical use."
        ),
    )
    async def analyze_variant(
        position: int,
        alternative: str,
        genome_id: str,
        chromosome: str,
    ) -> str:
        result = await handle_analyze_variant(
            {
                "position": position,
                "alternative": alternative,
                "genome_id": genome_id,
                "chromosome": chromosome,
            },
            config,
        )
        return str(result["content"][0]["text"])

    return mcp

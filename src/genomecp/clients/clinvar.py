"""ClinVar NCBI E-utilities API client for variants inside a gene span."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ..constants import DEFAULT_TIMEOUT_SECONDS, EUTILS_BASE
from ..core.normalize import decode_json_body, extract_id_list, parse_clinvar_summaries
from ..core.queries import (
    build_clinvar_search_term,
    clinvar_search_params,
    clinvar_summary_params,
    strip_chr_prefix,
)
from ..models import ClinvarVariant, GeneBounds

logger = logging.getLogger(__name__)


@dataclass
class ClinVarClient:
    """Async client for NCBI E-utilities ClinVar queries."""

    api_key: str | None = None
    eutils_base: str = EUTILS_BASE
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    async def fetch_variants(
        self, chrom: str, bounds: GeneBounds, genome_id: str
    ) -> list[ClinvarVariant]:
        """
        List ClinVar variants located inside a coordinate span.

        Args:
            chrom: Chromosome (e.g., "chr17" or "17").
            bounds: Span to search; min and max may be given in either order.
            genome_id: UCSC genome id; "hg19" searches GRCh37 positions,
                anything else GRCh38.

        Returns:
            Up to 20 variants in ClinVar order, or an empty list.

        Raises:
            httpx.HTTPStatusError: If either the search or summary call fails.
            httpx.RequestError: On a transport failure.
            UpstreamPayloadError: If either body is not JSON.
        """
        chromosome = strip_chr_prefix(chrom)
        term = build_clinvar_search_term(chrom, bounds, genome_id)

        params = clinvar_search_params(term)
        if self.api_key:
            params["api_key"] = self.api_key

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            # Step 1: esearch to find variation IDs
            search_resp = await client.get(f"{self.eutils_base}esearch.fcgi", params=params)
            search_resp.raise_for_status()

            id_list = extract_id_list(decode_json_body(search_resp, "ClinVar"))
            if not id_list:
                logger.info("No ClinVar variants found for %s", term)
                return []

            # Step 2: esummary for exactly those IDs
            summary_params: dict[str, str] = clinvar_summary_params(id_list)
            if self.api_key:
                summary_params["api_key"] = self.api_key

            summary_resp = await client.get(
                f"{self.eutils_base}esummary.fcgi", params=summary_params
            )
            summary_resp.raise_for_status()
            summary_data = decode_json_body(summary_resp, "ClinVar")

        variants = parse_clinvar_summaries(summary_data, chromosome)
        logger.debug(
            "ClinVar: %d of %d summaries decoded for %s", len(variants), len(id_list), term
        )
        return variants

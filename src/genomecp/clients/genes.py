"""Gene search and gene detail lookup.

Text search goes through the NLM Clinical Tables NCBI gene index; details come
from NCBI E-utilities esummary on the Gene database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ..constants import DEFAULT_TIMEOUT_SECONDS, EUTILS_BASE, GENE_SEARCH_URL
from ..core.normalize import decode_json_body, parse_gene_details, parse_gene_search
from ..core.queries import gene_search_params, gene_summary_params
from ..models import GeneDetailsResult, GeneSearchResponse

logger = logging.getLogger(__name__)


@dataclass
class GeneClient:
    """Async client for gene search and gene summaries."""

    search_url: str = GENE_SEARCH_URL
    eutils_base: str = EUTILS_BASE
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    async def search(self, query: str, genome: str) -> GeneSearchResponse:
        """Search genes by free text.

        The gene index is NCBI-wide, so ``genome`` is only echoed back in the
        response and is not sent upstream.

        Args:
            query: Free-text query (symbol, name, ...).
            genome: Genome the caller is browsing.

        Returns:
            Up to ten hits in upstream order.

        Raises:
            httpx.HTTPStatusError: On a non-success status.
            httpx.RequestError: On a transport failure.
            UpstreamPayloadError: If the body is not JSON.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(self.search_url, params=gene_search_params(query))
            resp.raise_for_status()
            payload = decode_json_body(resp, "Gene search")

        results = parse_gene_search(payload)
        if not results:
            logger.debug("Gene search: no results for %r", query)
        return GeneSearchResponse(query=query, genome=genome, results=tuple(results))

    async def fetch_details(self, gene_id: str) -> GeneDetailsResult:
        """Fetch a gene summary with its bounds and default view window.

        Never raises; any failure returns ``GeneDetailsResult.not_found()``.
        """
        params: dict[str, str] = gene_summary_params(gene_id)
        if self.api_key:
            params["api_key"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(f"{self.eutils_base}esummary.fcgi", params=params)
                resp.raise_for_status()
                payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Failed to fetch gene details for %s: %s", gene_id, e)
            return GeneDetailsResult.not_found()

        result = parse_gene_details(payload, gene_id)
        if not result.found:
            logger.debug("Gene %s has no usable genomic coordinates", gene_id)
        return result

"""UCSC Genome Browser REST API client for assemblies, chromosomes and sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ..constants import DEFAULT_TIMEOUT_SECONDS, SEQUENCE_FETCH_FAILED, UCSC_API_BASE
from ..core.normalize import (
    decode_json_body,
    group_genomes,
    parse_chromosomes,
    parse_sequence,
)
from ..core.queries import sequence_params
from ..models import Chromosome, GenomeAssembly, SequenceResult

logger = logging.getLogger(__name__)


@dataclass
class UCSCClient:
    """Async client for api.genome.ucsc.edu.

    Catalog and chromosome lookups raise on failure. Sequence fetches never
    raise; failures come back as a SequenceResult with ``error`` set.
    """

    base_url: str = UCSC_API_BASE
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    async def list_genomes(self) -> dict[str, list[GenomeAssembly]]:
        """Fetch the genome catalog grouped by organism.

        Raises:
            httpx.HTTPStatusError: On a non-success status.
            httpx.RequestError: On a transport failure.
            UpstreamPayloadError: If ``ucscGenomes`` is missing or the body is not JSON.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(f"{self.base_url}list/ucscGenomes")
            resp.raise_for_status()
            genomes = group_genomes(decode_json_body(resp, "UCSC"))

        logger.debug("UCSC: %d organisms in genome catalog", len(genomes))
        return genomes

    async def list_chromosomes(self, genome_id: str) -> list[Chromosome]:
        """Fetch the primary chromosomes of a genome in natural order.

        Args:
            genome_id: UCSC genome identifier (e.g., "hg38").

        Raises:
            httpx.HTTPStatusError: On a non-success status.
            httpx.RequestError: On a transport failure.
            UpstreamPayloadError: If ``chromosomes`` is missing or the body is not JSON.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(
                f"{self.base_url}list/chromosomes", params={"genome": genome_id}
            )
            resp.raise_for_status()
            return parse_chromosomes(decode_json_body(resp, "UCSC"))

    async def fetch_sequence(
        self, chrom: str, start: int, end: int, genome_id: str
    ) -> SequenceResult:
        """Fetch the reference sequence for a 1-based inclusive range.

        Args:
            chrom: Chromosome, with or without the "chr" prefix.
            start: First base (1-based, inclusive).
            end: Last base (1-based, inclusive).
            genome_id: UCSC genome identifier.

        Returns:
            SequenceResult whose ``actual_range`` is always ``(start, end)``.
        """
        params = sequence_params(chrom, start, end, genome_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                # UCSC reports range errors in the JSON body, so the status is not checked
                resp = await client.get(f"{self.base_url}getData/sequence", params=params)
                payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "UCSC sequence fetch failed for %s:%d-%d (%s): %s",
                chrom, start, end, genome_id, e,
            )
            return SequenceResult.failed(start, end, SEQUENCE_FETCH_FAILED)

        result = parse_sequence(payload, start, end)
        if result.error:
            logger.warning("UCSC sequence error for %s:%d-%d: %s", chrom, start, end, result.error)
        return result

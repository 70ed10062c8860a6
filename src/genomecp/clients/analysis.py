"""Client for the externally hosted single-variant effect scoring service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..constants import DEFAULT_TIMEOUT_SECONDS
from ..core.normalize import decode_json_body
from ..core.queries import variant_analysis_body
from ..errors import ConfigurationError, VariantAnalysisError
from ..models import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class VariantAnalysisClient:
    """POSTs a single variant to the scoring endpoint and returns its verdict as-is."""

    url: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    async def analyze(
        self, position: int, alternative: str, genome_id: str, chromosome: str
    ) -> AnalysisResult | Any:
        """Score a single-nucleotide variant.

        The decoded body is returned unchecked; it is usually an
        ``AnalysisResult`` object but any JSON value is passed through.

        Raises:
            ConfigurationError: If no scoring endpoint is configured.
            VariantAnalysisError: On a non-success status, with the response body.
            UpstreamPayloadError: If a successful response body is not JSON.
            httpx.RequestError: On a transport failure.
        """
        if not self.url:
            raise ConfigurationError("Variant analysis endpoint is not configured")

        body = variant_analysis_body(position, alternative, genome_id, chromosome)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(self.url, json=body)

        if not resp.is_success:
            logger.warning(
                "Variant analysis failed (%d) for %s:%d>%s", resp.status_code, chromosome,
                position, alternative,
            )
            raise VariantAnalysisError(resp.status_code, resp.text)

        return decode_json_body(resp, "Variant analysis")

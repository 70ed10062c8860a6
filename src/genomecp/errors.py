"""Domain errors raised by genomecp clients."""

from __future__ import annotations


class GenomeCPError(Exception):
    """Base class for genomecp errors."""


class ConfigurationError(GenomeCPError):
    """Raised when a required setting is missing or invalid."""


class UpstreamPayloadError(GenomeCPError, ValueError):
    """Raised when an upstream API answers with an unexpected payload shape."""


class VariantAnalysisError(GenomeCPError):
    """Raised when the variant scoring service answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to analyze variant: {body}")

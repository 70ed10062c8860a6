"""Configuration for the genomecp server, loaded from environment variables."""

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TRANSPORT,
    EUTILS_BASE,
    GENE_SEARCH_URL,
    UCSC_API_BASE,
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GenomeCPConfig:
    """Server configuration loaded from environment variables."""

    # Upstream endpoints
    ucsc_api_base: str = UCSC_API_BASE
    eutils_base: str = EUTILS_BASE
    gene_search_url: str = GENE_SEARCH_URL
    analyze_variant_url: str | None = None
    ncbi_api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    # Transport settings
    transport: str = DEFAULT_TRANSPORT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    trusted_hosts: list[str] | None = None

    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate config values and normalize base URLs."""
        if not self.ucsc_api_base.endswith("/"):
            self.ucsc_api_base += "/"
        if not self.eutils_base.endswith("/"):
            self.eutils_base += "/"

        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        valid_transports = ("stdio", "sse", "streamable-http")
        if self.transport not in valid_transports:
            raise ValueError(f"transport must be one of {valid_transports}, got '{self.transport}'")

        if not 1 <= self.port <= 65535:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got '{self.log_level}'")

    @classmethod
    def from_env(cls) -> "GenomeCPConfig":
        """Create config from environment variables."""
        env = os.environ

        trusted_hosts = [
            h.strip() for h in env.get("GENOMECP_TRUSTED_HOSTS", "").split(",") if h.strip()
        ] or None

        return cls(
            ucsc_api_base=env.get("GENOMECP_UCSC_API_BASE", UCSC_API_BASE),
            eutils_base=env.get("GENOMECP_EUTILS_BASE", EUTILS_BASE),
            gene_search_url=env.get("GENOMECP_GENE_SEARCH_URL", GENE_SEARCH_URL),
            analyze_variant_url=env.get("GENOMECP_ANALYZE_VARIANT_URL") or None,
            ncbi_api_key=env.get("GENOMECP_NCBI_API_KEY") or None,
            timeout=float(env.get("GENOMECP_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
            transport=env.get("GENOMECP_TRANSPORT", DEFAULT_TRANSPORT),
            host=env.get("GENOMECP_HOST", DEFAULT_HOST),
            port=int(env.get("GENOMECP_PORT", str(DEFAULT_PORT))),
            trusted_hosts=trusted_hosts,
            log_level=env.get("GENOMECP_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

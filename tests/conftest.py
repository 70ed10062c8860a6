"""Shared test fixtures for genomecp tests."""

import pytest

from genomecp.config import GenomeCPConfig
from genomecp.core import tools as _tools_module


@pytest.fixture(autouse=True)
def _reset_client_singletons():
    """Reset module-level client singletons between tests."""
    yield
    _tools_module._ucsc_client = None
    _tools_module._gene_client = None
    _tools_module._clinvar_client = None
    _tools_module._analysis_client = None


@pytest.fixture
def config():
    """Default test config."""
    return GenomeCPConfig()


@pytest.fixture
def analysis_config():
    """Config with a variant scoring endpoint."""
    return GenomeCPConfig(analyze_variant_url="https://scoring.example.org/analyze_variant")

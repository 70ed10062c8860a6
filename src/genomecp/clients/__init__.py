"""External API client modules."""

from .analysis import VariantAnalysisClient
from .clinvar import ClinVarClient
from .genes import GeneClient
from .ucsc import UCSCClient

__all__ = [
    "ClinVarClient",
    "GeneClient",
    "UCSCClient",
    "VariantAnalysisClient",
]

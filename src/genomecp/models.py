"""Internal record types returned by genomecp clients.

Every record is a frozen dataclass built once at the upstream boundary with
all optional fields already defaulted. Callers never see raw upstream shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class GenomeAssembly:
    """A named genome build from the UCSC catalog."""

    id: str
    name: str
    source_name: str
    active: bool


@dataclass(frozen=True)
class Chromosome:
    name: str
    size: int


@dataclass(frozen=True)
class GeneSearchResult:
    """One hit from the gene text search."""

    symbol: str
    name: str
    chrom: str
    description: str
    gene_id: str = ""


@dataclass(frozen=True)
class GeneSearchResponse:
    """Gene search hits, echoed with the query and genome they answer."""

    query: str
    genome: str
    results: tuple[GeneSearchResult, ...]


@dataclass(frozen=True)
class GenomicInfo:
    chrstart: int
    chrstop: int
    strand: str | None = None


@dataclass(frozen=True)
class Organism:
    scientificname: str
    commonname: str


@dataclass(frozen=True)
class GeneDetails:
    """Gene summary record. Only the first genomicinfo entry is authoritative."""

    genomicinfo: tuple[GenomicInfo, ...]
    summary: str | None = None
    organism: Organism | None = None


@dataclass(frozen=True)
class GeneBounds:
    """Inclusive coordinate span of a gene, with min <= max."""

    min: int
    max: int


@dataclass(frozen=True)
class ViewRange:
    start: int
    end: int


@dataclass(frozen=True)
class GeneDetailsResult:
    """Gene details with derived bounds and default view window.

    Either all three fields are set or all three are None (gene not found).
    """

    gene_details: GeneDetails | None
    gene_bounds: GeneBounds | None
    initial_range: ViewRange | None

    @classmethod
    def not_found(cls) -> GeneDetailsResult:
        return cls(gene_details=None, gene_bounds=None, initial_range=None)

    @property
    def found(self) -> bool:
        return self.gene_details is not None


@dataclass(frozen=True)
class SequenceResult:
    """Raw sequence for an inclusive range.

    ``actual_range`` is always the range the caller asked for. ``sequence`` is
    empty whenever ``error`` is set.
    """

    sequence: str
    actual_range: ViewRange
    error: str | None = None

    @classmethod
    def failed(cls, start: int, end: int, error: str) -> SequenceResult:
        return cls(sequence="", actual_range=ViewRange(start=start, end=end), error=error)


@dataclass(frozen=True)
class ClinvarVariant:
    """ClinVar summary normalized for display."""

    clinvar_id: str
    title: str
    variation_type: str
    classification: str
    gene_sort: str
    chromosome: str
    location: str


class AnalysisResult(TypedDict):
    """Scoring service response, passed through without local validation."""

    position: int
    reference: str
    alternative: str
    delta_score: float
    prediction: str
    classification_confidence: float

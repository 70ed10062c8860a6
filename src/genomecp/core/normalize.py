"""Response normalizers: raw upstream JSON -> genomecp records.

All functions here are pure. Batch decoders skip malformed items (the per-item
decoder returns None) instead of failing the whole batch. Envelope problems
on propagate-policy endpoints raise UpstreamPayloadError.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from ..constants import (
    DEFAULT_ORGANISM,
    EXCLUDED_CHROMOSOME_MARKERS,
    GENE_SEARCH_MAX_RESULTS,
    SEQUENCE_FETCH_FAILED,
    SEQUENCE_MISSING_DNA,
    UNKNOWN,
)
from ..errors import UpstreamPayloadError
from ..models import (
    Chromosome,
    ClinvarVariant,
    GeneDetails,
    GeneDetailsResult,
    GeneSearchResult,
    GenomeAssembly,
    GenomicInfo,
    Organism,
    SequenceResult,
    ViewRange,
)
from .ordering import (
    chromosome_sort_key,
    format_grouped_integer,
    gene_bounds,
    initial_view_range,
    title_case_words,
)
from .queries import with_chr_prefix

if TYPE_CHECKING:
    import httpx


def _is_number(value: Any) -> bool:
    """True for finite ints/floats; JSON booleans do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _str_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _as_count(value: Any) -> int:
    """Hit count as an int; digit strings are accepted, anything else is 0."""
    if _is_number(value):
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    return 0


def decode_json_body(resp: httpx.Response, source: str) -> Any:
    """Parse a response body as JSON.

    Raises:
        UpstreamPayloadError: If the body is not JSON (maintenance pages, proxies).
    """
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamPayloadError(f"{source} API error: response is not JSON") from e


# -- UCSC --------------------------------------------------------------------


def group_genomes(payload: Any) -> dict[str, list[GenomeAssembly]]:
    """Group the UCSC genome catalog by organism.

    Organisms appear in first-seen order and assemblies keep catalog order
    within each organism. Entries without an organism go under ``"Other"``.

    Raises:
        UpstreamPayloadError: If the payload has no ``ucscGenomes`` mapping.
    """
    genomes = payload.get("ucscGenomes") if isinstance(payload, dict) else None
    if not isinstance(genomes, dict):
        raise UpstreamPayloadError("UCSC API error: missing ucscGenomes")

    grouped: dict[str, list[GenomeAssembly]] = {}
    for genome_id, info in genomes.items():
        if not isinstance(info, dict) or not info:
            continue

        organism = _str_or(info.get("organism"), DEFAULT_ORGANISM)
        grouped.setdefault(organism, []).append(
            GenomeAssembly(
                id=genome_id,
                name=_str_or(info.get("description"), genome_id),
                source_name=_str_or(info.get("sourceName"), genome_id),
                active=bool(info.get("active")),
            )
        )
    return grouped


def is_primary_chromosome(name: str) -> bool:
    """False for unplaced, unlocalized and alternate scaffolds."""
    return not any(marker in name for marker in EXCLUDED_CHROMOSOME_MARKERS)


def parse_chromosomes(payload: Any) -> list[Chromosome]:
    """Primary chromosomes from a UCSC size map, in natural order.

    Raises:
        UpstreamPayloadError: If the payload has no ``chromosomes`` mapping.
    """
    sizes = payload.get("chromosomes") if isinstance(payload, dict) else None
    if not isinstance(sizes, dict):
        raise UpstreamPayloadError("UCSC API error: missing chromosomes")

    chromosomes = [
        Chromosome(name=name, size=int(size))
        for name, size in sizes.items()
        if is_primary_chromosome(name) and _is_number(size)
    ]
    chromosomes.sort(key=lambda c: chromosome_sort_key(c.name))
    return chromosomes


def parse_sequence(payload: Any, start: int, end: int) -> SequenceResult:
    """Build a SequenceResult for the inclusive range the caller asked for."""
    if not isinstance(payload, dict):
        return SequenceResult.failed(start, end, SEQUENCE_FETCH_FAILED)

    error = payload.get("error")
    dna = payload.get("dna")
    if error or not isinstance(dna, str) or not dna:
        message = str(error) if error else SEQUENCE_MISSING_DNA
        return SequenceResult.failed(start, end, message)

    return SequenceResult(sequence=dna.upper(), actual_range=ViewRange(start=start, end=end))


# -- Gene search ---------------------------------------------------------------


def decode_gene_row(row: Any, gene_id: Any = "") -> GeneSearchResult | None:
    """Decode one display row ``[chromosome, _, symbol, name, ...]``.

    Returns None when the row does not have the expected shape.
    """
    if not isinstance(row, list) or len(row) < 4:
        return None

    symbol = row[2]
    name = row[3]
    if not isinstance(symbol, str) or not isinstance(name, str):
        return None

    chrom = row[0]
    chrom = with_chr_prefix(chrom) if isinstance(chrom, str) and chrom else ""

    return GeneSearchResult(
        symbol=symbol,
        name=name,
        chrom=chrom,
        description=name,
        gene_id=_str_or(gene_id, ""),
    )


def parse_gene_search(payload: Any) -> list[GeneSearchResult]:
    """Decode a ``[count, codes, extra_fields, display_rows]`` search response.

    Only the first ten rows are considered, in upstream row order. Malformed
    rows among them are skipped, so fewer than ten hits may come back.
    """
    if not isinstance(payload, list) or len(payload) < 4:
        return []

    count = _as_count(payload[0])
    _, _, field_map, rows = payload[:4]
    if count <= 0 or not isinstance(rows, list):
        return []

    gene_ids = field_map.get("GeneID") if isinstance(field_map, dict) else None
    if not isinstance(gene_ids, list):
        gene_ids = []

    results: list[GeneSearchResult] = []
    for i in range(min(GENE_SEARCH_MAX_RESULTS, count, len(rows))):
        gene_id = gene_ids[i] if i < len(gene_ids) else ""
        result = decode_gene_row(rows[i], gene_id)
        if result is not None:
            results.append(result)
    return results


# -- Gene details ------------------------------------------------------------


def decode_genomic_info(entry: Any) -> GenomicInfo | None:
    if not isinstance(entry, dict):
        return None
    start = entry.get("chrstart")
    stop = entry.get("chrstop")
    if not _is_number(start) or not _is_number(stop):
        return None
    strand = entry.get("strand")
    return GenomicInfo(
        chrstart=int(start),
        chrstop=int(stop),
        strand=strand if isinstance(strand, str) else None,
    )


def decode_organism(entry: Any) -> Organism | None:
    if not isinstance(entry, dict):
        return None
    return Organism(
        scientificname=_str_or(entry.get("scientificname"), ""),
        commonname=_str_or(entry.get("commonname"), ""),
    )


def parse_gene_details(payload: Any, gene_id: str) -> GeneDetailsResult:
    """Decode a gene esummary and derive its bounds and default view window.

    Only the first genomicinfo entry decides the coordinates; if it is missing
    or not numeric the gene counts as not found.
    """
    result = payload.get("result") if isinstance(payload, dict) else None
    detail = result.get(gene_id) if isinstance(result, dict) else None
    if not isinstance(detail, dict):
        return GeneDetailsResult.not_found()

    raw_info = detail.get("genomicinfo")
    if not isinstance(raw_info, list) or not raw_info:
        return GeneDetailsResult.not_found()

    primary = decode_genomic_info(raw_info[0])
    if primary is None:
        return GeneDetailsResult.not_found()

    others = (decode_genomic_info(entry) for entry in raw_info[1:])
    summary = detail.get("summary")
    details = GeneDetails(
        genomicinfo=(primary, *(info for info in others if info is not None)),
        summary=summary if isinstance(summary, str) else None,
        organism=decode_organism(detail.get("organism")),
    )

    bounds = gene_bounds(primary.chrstart, primary.chrstop)
    return GeneDetailsResult(
        gene_details=details,
        gene_bounds=bounds,
        initial_range=initial_view_range(bounds),
    )


# -- ClinVar -------------------------------------------------------------------


def extract_id_list(payload: Any) -> list[str]:
    """ID list from an esearch response; empty when absent."""
    search = payload.get("esearchresult") if isinstance(payload, dict) else None
    ids = search.get("idlist") if isinstance(search, dict) else None
    if not isinstance(ids, list):
        return []
    return [str(i) for i in ids if isinstance(i, (str, int)) and not isinstance(i, bool)]


def decode_clinvar_variant(uid: str, entry: Any, chromosome: str) -> ClinvarVariant | None:
    """Decode one ClinVar esummary record.

    Returns None for anything that is not a keyed record, which includes the
    sibling ``uids`` list.
    """
    if not isinstance(entry, dict):
        return None

    obj_type = entry.get("obj_type")
    if obj_type is None:
        variation_type = UNKNOWN
    elif isinstance(obj_type, str):
        variation_type = title_case_words(obj_type)
    else:
        variation_type = UNKNOWN

    germline = entry.get("germline_classification")
    description = germline.get("description") if isinstance(germline, dict) else None

    return ClinvarVariant(
        clinvar_id=uid,
        title=_str_or(entry.get("title"), ""),
        variation_type=variation_type,
        classification=_str_or(description, UNKNOWN),
        gene_sort=_str_or(entry.get("gene_sort"), ""),
        chromosome=chromosome,
        location=format_grouped_integer(entry.get("location_sort")),
    )


def parse_clinvar_summaries(payload: Any, chromosome: str) -> list[ClinvarVariant]:
    """Decode a ClinVar esummary response in ``uids`` order."""
    result = payload.get("result") if isinstance(payload, dict) else None
    if not isinstance(result, dict):
        return []
    uids = result.get("uids")
    if not isinstance(uids, list):
        return []

    variants: list[ClinvarVariant] = []
    for raw_uid in uids:
        uid = str(raw_uid)
        variant = decode_clinvar_variant(uid, result.get(uid), chromosome)
        if variant is not None:
            variants.append(variant)
    return variants

"""Ordering and derivation helpers for chromosomes, gene spans and labels."""

from __future__ import annotations

import functools
import re

from ..constants import GENE_VIEW_WINDOW, UNKNOWN
from ..models import GeneBounds, ViewRange

_NUMERIC = re.compile(r"\d+")


def _strip_chr(name: str) -> str:
    return name[3:] if name.startswith("chr") else name


def compare_chromosomes(a: str, b: str) -> int:
    """Compare two chromosome names in natural order.

    A leading ``chr`` is ignored. Purely numeric names compare by value and
    sort before any non-numeric name; non-numeric names compare as strings.

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, else 0.
    """
    rest_a = _strip_chr(a)
    rest_b = _strip_chr(b)
    num_a = _NUMERIC.fullmatch(rest_a) is not None
    num_b = _NUMERIC.fullmatch(rest_b) is not None

    if num_a and num_b:
        return int(rest_a) - int(rest_b)
    if num_a:
        return -1
    if num_b:
        return 1
    return (rest_a > rest_b) - (rest_a < rest_b)


chromosome_sort_key = functools.cmp_to_key(compare_chromosomes)


def gene_bounds(chrstart: int, chrstop: int) -> GeneBounds:
    """Bounds of a gene from its start/stop, which may be reversed on the minus strand."""
    return GeneBounds(min=min(chrstart, chrstop), max=max(chrstart, chrstop))


def initial_view_range(bounds: GeneBounds, window: int = GENE_VIEW_WINDOW) -> ViewRange:
    """Default viewer window for a gene.

    Genes longer than ``window`` bases show their first ``window`` bases from
    the lower bound; shorter genes show their full span.
    """
    size = bounds.max - bounds.min
    end = bounds.min + window if size > window else bounds.max
    return ViewRange(start=bounds.min, end=end)


def title_case_words(text: str) -> str:
    """Uppercase the first letter of each space-separated word, lowercase the rest.

    Examples:
        >>> title_case_words("single nucleotide variant")
        'Single Nucleotide Variant'
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def format_grouped_integer(value: object) -> str:
    """Render a numeric value as a comma-grouped integer, or ``"Unknown"``.

    ClinVar ``location_sort`` values arrive as zero-padded strings.
    """
    if value is None or value == "" or isinstance(value, bool):
        return UNKNOWN
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        try:
            number = int(float(value))  # type: ignore[arg-type]
        except (TypeError, ValueError, OverflowError):
            return UNKNOWN
    return f"{number:,}"

"""Unit tests for genomecp.core.validation module."""

import pytest

from genomecp.core.validation import (
    validate_chromosome,
    validate_gene_id,
    validate_genome_id,
    validate_query,
    validate_range,
    validate_variant_input,
)


class TestValidateIdentifiers:
    """Tests for genome, gene and chromosome validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("genome_id", ["hg38", "hg19", "mm39", "GCF_000001405.40"])
    def test_valid_genome_ids(self, genome_id):
        validate_genome_id(genome_id)

    @pytest.mark.unit
    @pytest.mark.parametrize("genome_id", ["", "hg38;chrom=chr1", "../etc", "hg 38"])
    def test_invalid_genome_ids(self, genome_id):
        with pytest.raises(ValueError, match="Invalid genome id"):
            validate_genome_id(genome_id)

    @pytest.mark.unit
    def test_valid_gene_id(self):
        validate_gene_id("672")

    @pytest.mark.unit
    @pytest.mark.parametrize("gene_id", ["", "BRCA1", "672,7157"])
    def test_invalid_gene_ids(self, gene_id):
        with pytest.raises(ValueError):
            validate_gene_id(gene_id)

    @pytest.mark.unit
    @pytest.mark.parametrize("chrom", ["chr1", "17", "chrX", "CHRM", "chr6_GL000250v2_alt"])
    def test_valid_chromosomes(self, chrom):
        validate_chromosome(chrom)

    @pytest.mark.unit
    @pytest.mark.parametrize("chrom", ["", "chr1;drop", "chr 1"])
    def test_invalid_chromosomes(self, chrom):
        with pytest.raises(ValueError, match="Invalid chromosome"):
            validate_chromosome(chrom)


class TestValidateQuery:
    """Tests for search query validation."""

    @pytest.mark.unit
    def test_valid(self):
        validate_query("BRCA1")

    @pytest.mark.unit
    def test_blank(self):
        with pytest.raises(ValueError, match="empty"):
            validate_query("   ")

    @pytest.mark.unit
    def test_too_long(self):
        with pytest.raises(ValueError, match="too long"):
            validate_query("A" * 500)


class TestValidateRange:
    """Tests for coordinate range validation."""

    @pytest.mark.unit
    def test_valid(self):
        validate_range(1000, 2000)

    @pytest.mark.unit
    def test_single_base(self):
        validate_range(5, 5)

    @pytest.mark.unit
    def test_zero_start(self):
        with pytest.raises(ValueError, match="at least 1"):
            validate_range(0, 10)

    @pytest.mark.unit
    def test_reversed(self):
        with pytest.raises(ValueError, match="before start"):
            validate_range(2000, 1000)

    @pytest.mark.unit
    def test_too_large(self):
        with pytest.raises(ValueError, match="too large"):
            validate_range(1, 5_000_000)

    @pytest.mark.unit
    def test_no_limit(self):
        validate_range(1, 5_000_000, max_span=None)


class TestValidateVariantInput:
    """Tests for variant analysis input validation."""

    @pytest.mark.unit
    def test_valid(self):
        assert validate_variant_input(43119628, "G", "hg38", "chr17") is None

    @pytest.mark.unit
    def test_bad_allele(self):
        assert "allele" in validate_variant_input(100, "Z", "hg38", "chr17")

    @pytest.mark.unit
    def test_bad_position(self):
        assert "positive" in validate_variant_input(0, "A", "hg38", "chr17")

    @pytest.mark.unit
    def test_bad_chromosome(self):
        assert "chromosome" in validate_variant_input(10, "A", "hg38", "chr 1")

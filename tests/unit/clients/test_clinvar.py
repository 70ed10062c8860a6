"""Unit tests for genomecp.clients.clinvar module."""

import re

import httpx
import pytest

from genomecp.clients.clinvar import ClinVarClient
from genomecp.errors import UpstreamPayloadError
from genomecp.models import GeneBounds

ESEARCH_URL = re.compile(r".*/esearch\.fcgi.*")
ESUMMARY_URL = re.compile(r".*/esummary\.fcgi.*")

# -- Sample API response fixtures -------------------------------------------

ESEARCH_RESPONSE = {
    "esearchresult": {
        "count": "2",
        "retmax": "20",
        "idlist": ["55602", "17661"],
    }
}

ESEARCH_EMPTY = {
    "esearchresult": {
        "count": "0",
        "retmax": "20",
        "idlist": [],
    }
}

ESUMMARY_RESPONSE = {
    "result": {
        "uids": ["55602", "17661"],
        "55602": {
            "uid": "55602",
            "title": "NM_007294.4(BRCA1):c.5266dup (p.Gln1756fs)",
            "obj_type": "single nucleotide variant",
            "germline_classification": {"description": "Pathogenic"},
            "gene_sort": "BRCA1",
            "location_sort": "00000000043057051",
        },
        "17661": {
            "uid": "17661",
            "title": "NM_007294.4(BRCA1):c.68_69del (p.Glu23fs)",
            "obj_type": "Deletion",
            "gene_sort": "BRCA1",
            "location_sort": 43124027,
        },
    }
}


class TestFetchVariants:
    """Tests for ClinVarClient.fetch_variants."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_two_step_lookup(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, json=ESEARCH_RESPONSE)
        httpx_mock.add_response(url=ESUMMARY_URL, json=ESUMMARY_RESPONSE)

        variants = await ClinVarClient().fetch_variants(
            "chr17", GeneBounds(min=43044295, max=43125483), "hg38"
        )

        assert [v.clinvar_id for v in variants] == ["55602", "17661"]
        first, second = variants
        assert first.variation_type == "Single Nucleotide Variant"
        assert first.classification == "Pathogenic"
        assert first.chromosome == "17"
        assert first.location == "43,057,051"
        assert second.classification == "Unknown"
        assert second.location == "43,124,027"

        search, summary = httpx_mock.get_requests()
        assert search.url.params["db"] == "clinvar"
        assert search.url.params["term"] == "17[chromosome] AND 43044295:43125483[chrpos38]"
        assert search.url.params["retmax"] == "20"
        assert summary.url.params["id"] == "55602,17661"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_hg19_uses_grch37_positions(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, json=ESEARCH_EMPTY)

        await ClinVarClient().fetch_variants(
            "chr17", GeneBounds(min=41277500, max=41196312), "hg19"
        )

        term = httpx_mock.get_requests()[0].url.params["term"]
        assert term == "17[chromosome] AND 41196312:41277500[chrpos37]"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_ids_skips_summary(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, json=ESEARCH_EMPTY)

        variants = await ClinVarClient().fetch_variants(
            "chrX", GeneBounds(min=1, max=100), "hg38"
        )

        assert variants == []
        assert len(httpx_mock.get_requests()) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_api_key_on_both_calls(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, json=ESEARCH_RESPONSE)
        httpx_mock.add_response(url=ESUMMARY_URL, json=ESUMMARY_RESPONSE)

        await ClinVarClient(api_key="secret").fetch_variants(
            "17", GeneBounds(min=1, max=2), "hg38"
        )

        for request in httpx_mock.get_requests():
            assert request.url.params["api_key"] == "secret"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_search_failure_raises(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, status_code=500)

        with pytest.raises(httpx.HTTPStatusError):
            await ClinVarClient().fetch_variants("17", GeneBounds(min=1, max=2), "hg38")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_summary_failure_raises(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, json=ESEARCH_RESPONSE)
        httpx_mock.add_response(url=ESUMMARY_URL, status_code=429)

        with pytest.raises(httpx.HTTPStatusError):
            await ClinVarClient().fetch_variants("17", GeneBounds(min=1, max=2), "hg38")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_malformed_records_skipped(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, json=ESEARCH_RESPONSE)
        partial = {
            "uids": ["55602", "17661"],
            "17661": ESUMMARY_RESPONSE["result"]["17661"],
        }
        httpx_mock.add_response(url=ESUMMARY_URL, json={"result": partial})

        variants = await ClinVarClient().fetch_variants("17", GeneBounds(min=1, max=2), "hg38")
        assert [v.clinvar_id for v in variants] == ["17661"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_json_search_raises(self, httpx_mock):
        httpx_mock.add_response(url=ESEARCH_URL, text="<html>maintenance</html>")

        with pytest.raises(UpstreamPayloadError):
            await ClinVarClient().fetch_variants("17", GeneBounds(min=1, max=2), "hg38")

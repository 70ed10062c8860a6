"""Unit tests for genomecp.clients.genes module."""

import re

import httpx
import pytest

from genomecp.clients.genes import GeneClient
from genomecp.errors import UpstreamPayloadError
from genomecp.models import GeneBounds, GeneDetailsResult, ViewRange

SEARCH_URL = re.compile(r".*/ncbi_genes/v3/search.*")
SUMMARY_URL = re.compile(r".*/esummary\.fcgi.*")

# -- Sample API response fixtures -------------------------------------------

SEARCH_RESPONSE = [
    2,
    ["672", "394269"],
    {"GeneID": ["672", "394269"]},
    [
        ["17", "BRCA1", "BRCA1", "BRCA1 DNA repair associated", "protein-coding"],
        ["17", "BRCA1P1", "BRCA1P1", "BRCA1 pseudogene 1", "pseudo"],
    ],
]

SUMMARY_RESPONSE = {
    "result": {
        "uids": ["672"],
        "672": {
            "uid": "672",
            "summary": "This gene encodes a 190 kD nuclear phosphoprotein.",
            "organism": {"scientificname": "Homo sapiens", "commonname": "human"},
            "genomicinfo": [
                {"chrloc": "17", "chrstart": 43125482, "chrstop": 43044294},
            ],
        },
    }
}


class TestGeneSearch:
    """Tests for GeneClient.search."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_search(self, httpx_mock):
        httpx_mock.add_response(url=SEARCH_URL, json=SEARCH_RESPONSE)

        response = await GeneClient().search("BRCA1", "hg38")

        assert response.query == "BRCA1"
        assert response.genome == "hg38"
        assert [r.symbol for r in response.results] == ["BRCA1", "BRCA1P1"]
        assert response.results[0].chrom == "chr17"
        assert response.results[0].gene_id == "672"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_genome_not_forwarded(self, httpx_mock):
        httpx_mock.add_response(url=SEARCH_URL, json=SEARCH_RESPONSE)

        await GeneClient().search("BRCA1", "hg19")

        params = httpx_mock.get_requests()[0].url.params
        assert params["terms"] == "BRCA1"
        assert "genome" not in params
        assert "hg19" not in str(httpx_mock.get_requests()[0].url)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cap_of_ten(self, httpx_mock):
        rows = [["1", f"G{i}", f"G{i}", f"gene {i}"] for i in range(37)]
        httpx_mock.add_response(
            url=SEARCH_URL,
            json=[37, [], {"GeneID": [str(i) for i in range(37)]}, rows],
        )

        response = await GeneClient().search("G", "hg38")

        assert len(response.results) == 10
        assert [r.symbol for r in response.results] == [f"G{i}" for i in range(10)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_hits(self, httpx_mock):
        httpx_mock.add_response(url=SEARCH_URL, json=[0, [], None, []])

        response = await GeneClient().search("zzzz", "hg38")
        assert response.results == ()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_http_error_raises(self, httpx_mock):
        httpx_mock.add_response(url=SEARCH_URL, status_code=500)

        with pytest.raises(httpx.HTTPStatusError):
            await GeneClient().search("BRCA1", "hg38")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_json_body_raises(self, httpx_mock):
        httpx_mock.add_response(url=SEARCH_URL, text="<html>maintenance</html>")

        with pytest.raises(UpstreamPayloadError):
            await GeneClient().search("BRCA1", "hg38")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_digit_string_count(self, httpx_mock):
        httpx_mock.add_response(url=SEARCH_URL, json=["2", *SEARCH_RESPONSE[1:]])

        response = await GeneClient().search("BRCA1", "hg38")
        assert len(response.results) == 2


class TestFetchDetails:
    """Tests for GeneClient.fetch_details."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_found(self, httpx_mock):
        httpx_mock.add_response(url=SUMMARY_URL, json=SUMMARY_RESPONSE)

        result = await GeneClient().fetch_details("672")

        assert result.gene_bounds == GeneBounds(min=43044294, max=43125482)
        assert result.initial_range == ViewRange(start=43044294, end=43054294)
        assert result.gene_details is not None
        assert result.gene_details.organism.commonname == "human"
        params = httpx_mock.get_requests()[0].url.params
        assert params["db"] == "gene"
        assert params["id"] == "672"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_api_key_sent(self, httpx_mock):
        httpx_mock.add_response(url=SUMMARY_URL, json=SUMMARY_RESPONSE)

        await GeneClient(api_key="secret").fetch_details("672")

        assert httpx_mock.get_requests()[0].url.params["api_key"] == "secret"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_malformed_absorbed(self, httpx_mock):
        httpx_mock.add_response(url=SUMMARY_URL, json={"result": {"672": {"summary": "x"}}})

        result = await GeneClient().fetch_details("672")
        assert result == GeneDetailsResult.not_found()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_http_error_absorbed(self, httpx_mock):
        httpx_mock.add_response(url=SUMMARY_URL, status_code=502)

        result = await GeneClient().fetch_details("672")
        assert result == GeneDetailsResult.not_found()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_transport_error_absorbed(self, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("unreachable"), url=SUMMARY_URL)

        result = await GeneClient().fetch_details("672")
        assert result.gene_details is None
        assert result.gene_bounds is None
        assert result.initial_range is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_json_absorbed(self, httpx_mock):
        httpx_mock.add_response(url=SUMMARY_URL, text="not json")

        result = await GeneClient().fetch_details("672")
        assert not result.found

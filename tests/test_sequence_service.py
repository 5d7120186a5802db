import httpx
import pytest

from tgv.contig import Contig
from tgv.errors import TGVIOError
from tgv.reference import Reference
from tgv.region import Region
from tgv.sequence_service import SequenceService

CHR1 = Contig.chrom("chr1")


def make_service(handler, reference=Reference.HG19):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SequenceService(reference, client=client)


def test_api_url_hg19():
    svc = make_service(lambda request: httpx.Response(200, json={}))
    assert svc.api_url(CHR1, 11, 20) == (
        "https://api.genome.ucsc.edu/getData/sequence"
        "?genome=hg19;chrom=chr1;start=10;end=20"
    )


def test_api_url_hg38_uses_reference_and_full_name():
    svc = make_service(lambda request: httpx.Response(200, json={}), Reference.HG38)
    url = svc.api_url(Contig.chrom("17"), 1, 5)
    assert "genome=hg38" in url
    assert "chrom=chr17" in url
    assert url.endswith("start=0;end=5")


def test_query_sequence_returns_dna():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"dna": "ACGTACGTAC"})

    svc = make_service(handler)
    region = Region(CHR1, 11, 20)
    sequence = svc.query_sequence(region)
    assert sequence.sequence == "ACGTACGTAC"
    assert sequence.start == region.start
    assert sequence.contig == CHR1
    assert sequence.get_sequence(region) == "ACGTACGTAC"
    assert seen[0].url.path == "/getData/sequence"
    assert b"chrom=chr1" in seen[0].url.query


def test_query_sequence_missing_dna():
    svc = make_service(lambda request: httpx.Response(200, json={"error": "bad"}))
    with pytest.raises(TGVIOError):
        svc.query_sequence(Region(CHR1, 1, 2))


def test_query_sequence_not_json():
    svc = make_service(lambda request: httpx.Response(500, text="oops"))
    with pytest.raises(TGVIOError):
        svc.query_sequence(Region(CHR1, 1, 2))


def test_query_sequence_transport_error():
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    svc = make_service(handler)
    with pytest.raises(TGVIOError):
        svc.query_sequence(Region(CHR1, 1, 2))


def test_close_keeps_injected_client_open():
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    with SequenceService(Reference.HG19, client=client):
        pass
    assert client.is_closed is False


def test_close_owned_client():
    svc = SequenceService(Reference.HG19)
    svc.close()
    assert svc._client.is_closed is True
"""Reference sequences fetched from the UCSC REST API."""

from __future__ import annotations

import httpx

from tgv.contig import Contig
from tgv.errors import TGVIOError
from tgv.reference import Reference
from tgv.region import Region
from tgv.sequence import Sequence

API_BASE = "https://api.genome.ucsc.edu/getData/sequence"


class SequenceService:
    """Fetches the bases of genome regions for one reference."""

    def __init__(self, reference: Reference, client: httpx.Client | None = None) -> None:
        self.reference = reference
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()

    def __enter__(self) -> SequenceService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client if this service created it."""
        if self._owns_client:
            self._client.close()

    def api_url(self, contig: Contig, start: int, end: int) -> str:
        """Request URL for the 1-based inclusive interval ``[start, end]``."""
        return (
            f"{API_BASE}?genome={self.reference};chrom={contig.full_name()};"
            f"start={start - 1};end={end}"
        )

    def query_sequence(self, region: Region) -> Sequence:
        """Fetch the bases of ``region``."""
        url = self.api_url(region.contig, region.start, region.end)
        try:
            response = self._client.get(url)
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise TGVIOError(f"Sequence service error: {e}") from e
        dna = payload.get("dna") if isinstance(payload, dict) else None
        if not isinstance(dna, str):
            raise TGVIOError("Sequence service error: no sequence in response")
        return Sequence(start=region.start, sequence=dna, contig=region.contig)
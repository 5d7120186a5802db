"""Gene annotations read from the UCSC MySQL gene tables."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import pymysql
import pymysql.cursors

from tgv.contig import Contig
from tgv.errors import TGVIOError, TGVValueError
from tgv.reference import Reference
from tgv.region import Region
from tgv.strand import Strand
from tgv.track import Feature, Gene, Track

DEFAULT_HOST = "genome-mysql.soe.ucsc.edu"
DEFAULT_USER = "genome"
DEFAULT_PORT = 3306

_COLUMNS = (
    "name, chrom, strand, txStart, txEnd, name2, "
    "exonStarts, exonEnds, cdsStart, cdsEnd"
)
_GENES_BETWEEN_SQL = (
    f"SELECT {_COLUMNS} FROM ncbiRefSeqSelect "
    "WHERE chrom = %s AND (txStart <= %s) AND (txEnd >= %s)"
)
_GENE_COVERING_SQL = (
    f"SELECT {_COLUMNS} FROM ncbiRefSeqSelect "
    "WHERE chrom = %s AND txStart <= %s AND txEnd >= %s"
)
_GENE_NAME_SQL = f"SELECT {_COLUMNS} FROM ncbiRefSeqSelect WHERE name2 = %s"
_GENES_AFTER_SQL = (
    f"SELECT {_COLUMNS} FROM ncbiRefSeqSelect "
    "WHERE chrom = %s AND txEnd >= %s ORDER BY txEnd ASC LIMIT %s"
)
_GENES_BEFORE_SQL = (
    f"SELECT {_COLUMNS} FROM ncbiRefSeqSelect "
    "WHERE chrom = %s AND txStart <= %s ORDER BY txStart DESC LIMIT %s"
)

_COORD_RE = re.compile(r"\+?[0-9]+")


def parse_blob_to_coords(blob: bytes | str) -> list[int]:
    """Parse a comma-separated list of coordinates, skipping invalid entries."""
    text = blob.decode("utf-8", errors="replace") if isinstance(blob, bytes) else blob
    return [int(part) for part in text.rstrip(",").split(",") if _COORD_RE.fullmatch(part)]


def gene_from_row(row: Mapping[str, Any]) -> Gene:
    """Build a gene from a table row, converting 0-based half-open coordinates."""
    return Gene(
        id=row["name"],
        name=row["name2"],
        strand=Strand.parse(row["strand"]),
        contig=Contig.chrom(row["chrom"]),
        transcription_start=int(row["txStart"]) + 1,
        transcription_end=int(row["txEnd"]),
        cds_start=int(row["cdsStart"]) + 1,
        cds_end=int(row["cdsEnd"]),
        exon_starts=[v + 1 for v in parse_blob_to_coords(row["exonStarts"])],
        exon_ends=parse_blob_to_coords(row["exonEnds"]),
    )


class TrackService:
    """Queries gene annotations of one reference genome.

    ``connection`` is a DB-API connection whose cursors yield rows as
    mappings of column name to value.
    """

    def __init__(self, connection: Any, reference: Reference) -> None:
        self._connection = connection
        self.reference = reference

    @classmethod
    def connect(
        cls,
        reference: Reference,
        host: str = DEFAULT_HOST,
        user: str = DEFAULT_USER,
        password: str | None = None,
        port: int = DEFAULT_PORT,
    ) -> TrackService:
        """Open a connection to the annotation database of ``reference``."""
        try:
            connection = pymysql.connect(
                host=host,
                user=user,
                password=password or "",
                port=port,
                database=str(reference),
                cursorclass=pymysql.cursors.DictCursor,
            )
        except pymysql.MySQLError as e:
            raise TGVIOError(str(e)) from e
        return cls(connection, reference)

    def __enter__(self) -> TrackService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._connection.close()

    def _fetch_all(self, sql: str, params: tuple[Any, ...]) -> list[Mapping[str, Any]]:
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(sql, params)
                return list(cursor.fetchall())
        except pymysql.MySQLError as e:
            raise TGVIOError(str(e)) from e

    def _fetch_one(self, sql: str, params: tuple[Any, ...]) -> Mapping[str, Any] | None:
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(sql, params)
                return cursor.fetchone()
        except pymysql.MySQLError as e:
            raise TGVIOError(str(e)) from e

    def query_feature_track(self, region: Region) -> Track:
        """A track of all genes overlapping ``region``."""
        genes = self.query_genes_between(region.contig, region.start, region.end)
        return Track.from_genes(genes, region.contig)

    def query_genes_between(self, contig: Contig, start: int, end: int) -> list[Gene]:
        """Genes overlapping the 1-based inclusive interval ``[start, end]``."""
        rows = self._fetch_all(
            _GENES_BETWEEN_SQL, (contig.full_name(), end, max(start - 1, 0))
        )
        return [gene_from_row(row) for row in rows]

    def query_gene_covering(self, contig: Contig, coord: int) -> Gene | None:
        """A gene covering the 1-based ``coord``, if any."""
        row = self._fetch_one(
            _GENE_COVERING_SQL, (contig.full_name(), max(coord - 1, 0), coord)
        )
        return gene_from_row(row) if row is not None else None

    def query_gene_name(self, gene_name: str) -> Gene:
        """The gene with the given symbol."""
        row = self._fetch_one(_GENE_NAME_SQL, (gene_name,))
        if row is None:
            raise TGVIOError(f"Failed to query gene: {gene_name}")
        return gene_from_row(row)

    def _track_after(self, contig: Contig, coord: int, k: int) -> Track:
        rows = self._fetch_all(_GENES_AFTER_SQL, (contig.full_name(), coord, k + 1))
        return Track.from_genes([gene_from_row(row) for row in rows], contig)

    def _track_before(self, contig: Contig, coord: int, k: int) -> Track:
        rows = self._fetch_all(
            _GENES_BEFORE_SQL, (contig.full_name(), max(coord - 1, 0), k + 1)
        )
        return Track.from_genes([gene_from_row(row) for row in rows], contig)

    def query_k_genes_after(self, contig: Contig, coord: int, k: int) -> Gene:
        """The k-th gene after ``coord``, or the last one found."""
        if k == 0:
            raise TGVValueError("k cannot be 0")
        track = self._track_after(contig, coord, k)
        if track.is_empty():
            raise TGVIOError("No genes found")
        gene = track.get_saturating_k_genes_after(coord, k)
        if gene is None:
            raise TGVIOError("No genes found")
        return gene

    def query_k_genes_before(self, contig: Contig, coord: int, k: int) -> Gene:
        """The k-th gene before ``coord``, or the first one found."""
        if k == 0:
            raise TGVValueError("k cannot be 0")
        track = self._track_before(contig, coord, k)
        if track.is_empty():
            raise TGVIOError("No genes found")
        gene = track.get_saturating_k_genes_before(coord, k)
        if gene is None:
            raise TGVIOError("No genes found")
        return gene

    def query_k_exons_after(self, contig: Contig, coord: int, k: int) -> Feature:
        """The k-th exon after ``coord``, or the last one found."""
        if k == 0:
            raise TGVValueError("k cannot be 0")
        exon = self._track_after(contig, coord, k).get_saturating_k_exons_after(coord, k)
        if exon is None:
            raise TGVIOError("No exons found")
        return exon

    def query_k_exons_before(self, contig: Contig, coord: int, k: int) -> Feature:
        """The k-th exon before ``coord``, or the first one found."""
        if k == 0:
            raise TGVValueError("k cannot be 0")
        exon = self._track_before(contig, coord, k).get_saturating_k_exons_before(
            coord, k
        )
        if exon is None:
            raise TGVIOError("No exons found")
        return exon
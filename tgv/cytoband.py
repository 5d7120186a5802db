"""Chromosome cytoband ideograms."""

from __future__ import annotations

import csv
import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from tgv.contig import Contig
from tgv.errors import ParsingError, TGVValueError
from tgv.reference import Reference

VALID_CHROMOSOMES = frozenset(
    [f"chr{i}" for i in range(1, 23)] + ["chrX", "chrY", "chrMT"]
)


class Stain(enum.Enum):
    GNEG = "gneg"
    GPOS25 = "gpos25"
    GPOS50 = "gpos50"
    GPOS75 = "gpos75"
    GPOS100 = "gpos100"
    ACEN = "acen"
    GVAR = "gvar"
    STALK = "stalk"
    OTHER = "other"

    @classmethod
    def parse(cls, s: str) -> Stain:
        """Parse a Giemsa stain name as used in cytoband tables."""
        if s == cls.OTHER.value:
            raise TGVValueError(f"Invalid stain: {s}")
        try:
            return cls(s)
        except ValueError:
            raise TGVValueError(f"Invalid stain: {s}") from None


@dataclass
class CytobandSegment:
    """One band; ``start`` and ``end`` are 1-based and inclusive."""

    contig: Contig
    start: int
    end: int
    name: str
    stain: Stain


@dataclass
class Cytoband:
    """All bands of one contig."""

    reference: Reference | None
    contig: Contig
    segments: list[CytobandSegment] = field(default_factory=list)

    def start(self) -> int:
        return 1

    def end(self) -> int:
        if not self.segments:
            raise TGVValueError("Cytoband has no segments")
        return self.segments[-1].end

    def length(self) -> int:
        return self.end()

    @classmethod
    def from_csv(cls, stream: TextIO, reference: Reference) -> list[Cytoband]:
        """Read a cytoband table with a header row.

        Columns are chromosome, 0-based start, end, band name and stain.
        Only the main chromosomes are kept; consecutive rows of one
        chromosome make one cytoband.
        """
        rows = (row for row in csv.reader(stream) if row)
        header = next(rows, None)
        if header is None:
            return []

        cytobands: list[Cytoband] = []
        for line_no, row in enumerate(rows, start=2):
            if len(row) != len(header) or len(row) < 5:
                raise ParsingError(
                    f"Line {line_no}: expected {len(header)} fields, found {len(row)}"
                )
            contig_name = row[0]
            if contig_name not in VALID_CHROMOSOMES:
                continue

            contig = Contig.chrom(contig_name)
            start = _parse_position(row[1])
            end = _parse_position(row[2])
            try:
                stain = Stain.parse(row[4])
            except TGVValueError as e:
                raise ParsingError(str(e)) from None

            segment = CytobandSegment(contig, start + 1, end, row[3], stain)
            if not cytobands or cytobands[-1].contig != contig:
                cytobands.append(cls(reference, contig))
            cytobands[-1].segments.append(segment)
        return cytobands

    @classmethod
    def from_non_reference(
        cls, contigs: Sequence[Contig], lengths: Iterable[int]
    ) -> list[Cytoband]:
        """One single-band cytoband per contig, spanning its whole length."""
        return [
            cls(None, contig, [CytobandSegment(contig, 1, length, "", Stain.OTHER)])
            for contig, length in zip(contigs, lengths)
        ]


def _parse_position(s: str) -> int:
    if not s.isascii() or not s.isdigit():
        raise ParsingError(f"Invalid position: {s!r}")
    return int(s)
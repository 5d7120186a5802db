"""Supported reference genomes."""

from __future__ import annotations

import enum

from tgv.contig import Contig
from tgv.errors import ParsingError

_HG19_LENGTHS = {
    "chr1": 249250621,
    "chr2": 243199373,
    "chr3": 198022430,
    "chr4": 191154276,
    "chr5": 180915260,
    "chr6": 171115067,
    "chr7": 159138663,
    "chrX": 155270560,
    "chr8": 146364022,
    "chr9": 141213431,
    "chr10": 135534747,
    "chr11": 135006516,
    "chr12": 133851895,
    "chr13": 115169878,
    "chr14": 107349540,
    "chr15": 102531392,
    "chr16": 90354753,
    "chr17": 81195210,
    "chr18": 78077248,
    "chr20": 63025520,
    "chrY": 59373566,
    "chr19": 59128983,
    "chr22": 51304566,
    "chr21": 48129895,
}

_HG38_LENGTHS = {
    "chr1": 248956422,
    "chr2": 242193529,
    "chr3": 198295559,
    "chr4": 190214555,
    "chr5": 181538259,
    "chr6": 170805979,
    "chr7": 159345973,
    "chrX": 156040895,
    "chr8": 145138636,
    "chr9": 138394717,
    "chr11": 135086622,
    "chr10": 133797422,
    "chr12": 133275309,
    "chr13": 114364328,
    "chr14": 107043718,
    "chr15": 101991189,
    "chr16": 90338345,
    "chr17": 83257441,
    "chr18": 80373285,
    "chr20": 64444167,
    "chr19": 58617616,
    "chrY": 57227415,
    "chr22": 50818468,
    "chr21": 46709983,
}


class Reference(enum.Enum):
    HG19 = "hg19"
    HG38 = "hg38"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, s: str) -> Reference:
        """Parse a reference name such as ``"hg19"``."""
        try:
            return cls(s)
        except ValueError:
            raise ParsingError(f"Invalid reference: {s}") from None

    def length(self, contig: Contig) -> int | None:
        """Length of a chromosome in this reference, or None if unknown."""
        table = _HG19_LENGTHS if self is Reference.HG19 else _HG38_LENGTHS
        return table.get(contig.full_name())


SUPPORTED_REFERENCES = tuple(ref.value for ref in Reference)
"""Genomic regions."""

from __future__ import annotations

from dataclasses import dataclass

from tgv.contig import Contig
from tgv.errors import TGVValueError


@dataclass(frozen=True)
class Region:
    """A region on a contig; ``start`` and ``end`` are 1-based and inclusive."""

    contig: Contig
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise TGVValueError(
                f"Region start {self.start} is after end {self.end}"
            )

    def __str__(self) -> str:
        return f"{self.contig.full_name()}:{self.start}-{self.end}"

    def length(self) -> int:
        """Number of bases in the region."""
        return self.end - self.start + 1

    def width(self) -> int:
        """Width of the region in bases."""
        return self.length()

    def covers(self, position: int) -> bool:
        """Whether the 1-based ``position`` lies in the region."""
        return self.start <= position <= self.end
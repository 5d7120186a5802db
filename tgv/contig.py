"""Contig and chromosome names."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_ABBREVIATABLE_CHROMOSOMES = frozenset(
    [str(i) for i in range(1, 23)] + ["X", "Y", "MT"]
)


class ContigKind(enum.Enum):
    CHROMOSOME = "chromosome"
    CONTIG = "contig"


@dataclass(frozen=True)
class Contig:
    """A named sequence: either a chromosome or a generic contig."""

    kind: ContigKind
    name: str

    @classmethod
    def chrom(cls, s: str) -> Contig:
        """A chromosome; bare names such as ``"1"`` get the ``chr`` prefix."""
        if s in _ABBREVIATABLE_CHROMOSOMES:
            return cls(ContigKind.CHROMOSOME, f"chr{s}")
        return cls(ContigKind.CHROMOSOME, s)

    @classmethod
    def contig(cls, s: str) -> Contig:
        """A non-chromosome contig, name kept as given."""
        return cls(ContigKind.CONTIG, s)

    def full_name(self) -> str:
        """Full name, with the ``chr`` prefix where applicable."""
        return self.name

    def abbreviated_name(self) -> str:
        """Name without the ``chr`` prefix for chromosomes."""
        if self.kind is ContigKind.CHROMOSOME and self.name.startswith("chr"):
            return self.name[3:]
        return self.name
"""Reference sequence of a genome region."""

from __future__ import annotations

from dataclasses import dataclass

from tgv.contig import Contig
from tgv.region import Region


@dataclass
class Sequence:
    """Bases of a region; ``start`` is the 1-based coordinate of the first base."""

    start: int
    sequence: str
    contig: Contig

    def __len__(self) -> int:
        return len(self.sequence)

    def end(self) -> int:
        """Last covered coordinate, 1-based and inclusive."""
        return self.start + len(self.sequence) - 1

    def get_sequence(self, region: Region) -> str | None:
        """Bases in ``region``, or None if not fully loaded."""
        if not self.has_complete_data(region):
            return None
        return self.sequence[region.start - self.start : region.end - self.start + 1]

    def has_complete_data(self, region: Region) -> bool:
        """Whether every base of ``region`` is held."""
        return (
            region.contig == self.contig
            and region.start >= self.start
            and region.end <= self.end()
        )
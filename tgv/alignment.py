"""Aligned reads on a contig, stacked into display tracks, with coverage."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from tgv.contig import Contig
from tgv.errors import TGVIOError, TGVValueError
from tgv.region import Region


@dataclass(frozen=True)
class ReadRecord:
    """A read as stored in an alignment file.

    ``pos`` is the 0-based position of the first aligned base and
    ``reference_end`` the 0-based exclusive end of the aligned part; both
    leave out soft and hard clips.
    """

    pos: int
    reference_end: int
    leading_softclips: int = 0
    trailing_softclips: int = 0
    name: str = ""
    sequence: str = ""


@dataclass
class AlignedRead:
    """A read placed in the alignment view.

    ``start`` and ``end`` are 1-based and inclusive; ``y`` is the 0-based
    track the read is drawn on.
    """

    read: ReadRecord
    start: int
    end: int
    leading_softclips: int
    trailing_softclips: int
    y: int

    def range(self) -> range:
        """All 1-based positions covered by the aligned part of the read."""
        return range(self.start, self.end + 1)

    def stacking_start(self) -> int:
        """Leftmost position including leading soft clips, at least 1."""
        return max(self.start - self.leading_softclips, 1)

    def stacking_end(self) -> int:
        """Rightmost position including trailing soft clips."""
        return self.end + self.trailing_softclips


def query_contig_name(reference_names: Iterable[str], region: Region) -> str:
    """The name under which the region's contig appears in a file header.

    Headers may use full (``chr1``) or abbreviated (``1``) names.
    """
    full_name = region.contig.full_name()
    abbreviated_name = region.contig.abbreviated_name()
    for reference_name in reference_names:
        if reference_name == full_name:
            return full_name
        if reference_name == abbreviated_name:
            return abbreviated_name
    raise TGVIOError("Contig not found in header")


class Alignment:
    """Reads loaded for a region of one contig."""

    MIN_HORIZONTAL_GAP_BETWEEN_READS = 3

    def __init__(self, contig: Contig) -> None:
        self.reads: list[AlignedRead] = []
        self.contig = contig
        self._coverage: dict[int, int] = {}
        self._coverage_positions: list[int] = []
        self._data_complete_left_bound = 0
        self._data_complete_right_bound = 0
        self._track_most_left_bound = 0
        self._track_most_right_bound = 0
        self._track_left_bounds: list[int] = []
        self._track_right_bounds: list[int] = []

    @classmethod
    def from_records(cls, records: Iterable[ReadRecord], region: Region) -> Alignment:
        """Stack ``records`` fetched for ``region`` and compute their coverage.

        Stored coverage values are scaled as ``2 * (reads + 1)`` at every
        position touched by at least one read.
        """
        alignment = cls(region.contig)
        depth: Counter[int] = Counter()
        for record in records:
            aligned = alignment.add_read(record)
            depth.update(aligned.range())

        alignment._coverage = {pos: 2 * (n + 1) for pos, n in depth.items()}
        alignment._coverage_positions = sorted(alignment._coverage)
        alignment._data_complete_left_bound = region.start
        alignment._data_complete_right_bound = region.end
        return alignment

    # Data loading

    def has_complete_data(self, region: Region) -> bool:
        """Whether all reads in ``region`` are loaded."""
        return (
            region.contig == self.contig
            and region.start >= self._data_complete_left_bound
            and region.end <= self._data_complete_right_bound
        )

    def depth(self) -> int:
        """Number of display tracks."""
        return len(self._track_left_bounds)

    def coverage_at(self, pos: int) -> int:
        """Coverage at the 1-based position ``pos``."""
        if pos < self._data_complete_left_bound or pos > self._data_complete_right_bound:
            return 0
        return self._coverage.get(pos, 0)

    def mean_basewise_coverage_in(self, left: int, right: int) -> int:
        """Mean coverage over the 1-based inclusive interval ``[left, right]``."""
        if right < left:
            raise TGVValueError("Right is less than left")
        if right < self._data_complete_left_bound or left > self._data_complete_right_bound:
            return 0
        if right == left:
            return self.coverage_at(left)

        lo = bisect_left(self._coverage_positions, left)
        hi = bisect_right(self._coverage_positions, right)
        total = sum(self._coverage[p] for p in self._coverage_positions[lo:hi])
        return total // (right - left + 1)

    # Read stacking

    def _find_track(self, read_start: int, read_end: int) -> int:
        if not self.reads:
            return 0
        gap = self.MIN_HORIZONTAL_GAP_BETWEEN_READS
        for y, left_bound in enumerate(self._track_left_bounds):
            if read_end + gap < left_bound:
                return y
        for y, right_bound in enumerate(self._track_right_bounds):
            if read_start > right_bound + gap:
                return y
        return self.depth()

    def add_read(self, record: ReadRecord) -> AlignedRead:
        """Place a read on a track and return it. Coverage is not updated."""
        read_start = record.pos + 1
        read_end = record.reference_end
        leading = record.leading_softclips
        trailing = record.trailing_softclips

        y = self._find_track(max(read_start - leading, 0), read_end + trailing)
        aligned = AlignedRead(record, read_start, read_end, leading, trailing, y)

        stacking_start = aligned.stacking_start()
        stacking_end = aligned.stacking_end()
        if not self.reads or y >= len(self._track_left_bounds):
            self._track_left_bounds.append(stacking_start)
            self._track_right_bounds.append(stacking_end)
        else:
            self._track_left_bounds[y] = min(self._track_left_bounds[y], stacking_start)
            self._track_right_bounds[y] = max(self._track_right_bounds[y], stacking_end)

        self._track_most_left_bound = min(self._track_most_left_bound, stacking_start)
        self._track_most_right_bound = max(self._track_most_right_bound, stacking_end)

        self.reads.append(aligned)
        return aligned
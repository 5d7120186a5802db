"""All data held by a viewing session, loaded on request."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from tgv.alignment import Alignment
from tgv.errors import TGVError, TGVIOError
from tgv.helpers import is_url
from tgv.message import DataKind, DataMessage
from tgv.reference import Reference
from tgv.region import Region
from tgv.sequence import Sequence
from tgv.sequence_service import SequenceService
from tgv.track import Track
from tgv.track_service import TrackService

AlignmentReader = Callable[[str, "str | None", Region], Alignment]


def _check_local_bam(bam_path: str, bai_path: str | None) -> None:
    if not Path(bam_path).exists():
        raise TGVIOError(f"BAM file {bam_path} not found")
    if bai_path is not None:
        if not Path(bai_path).exists():
            raise TGVIOError(
                f"BAM index file {bai_path} not found. "
                "Only indexed BAM files are supported."
            )
    elif not Path(f"{bam_path}.bai").exists():
        raise TGVIOError(
            f"BAM index file {bam_path}.bai not found. "
            "Only indexed BAM files are supported."
        )


class Data:
    """Alignments, gene tracks and sequences for the session.

    Local BAM files and their indexes must exist. When ``reference`` is given,
    annotation and sequence services are opened for it unless provided.
    ``alignment_reader`` loads the alignment of a region from a BAM path and
    an optional index path.
    """

    def __init__(
        self,
        bam_path: str | None = None,
        bai_path: str | None = None,
        reference: Reference | None = None,
        *,
        track_service: TrackService | Any | None = None,
        sequence_service: SequenceService | Any | None = None,
        alignment_reader: AlignmentReader | None = None,
    ) -> None:
        if bam_path is not None and not is_url(bam_path):
            _check_local_bam(bam_path, bai_path)

        if reference is not None:
            if track_service is None:
                track_service = TrackService.connect(reference)
            if sequence_service is None:
                sequence_service = SequenceService(reference)

        self.bam_path = bam_path
        self.bai_path = bai_path
        self.alignment: Alignment | None = None
        self.track: Track | None = None
        self.sequence: Sequence | None = None
        self.track_service = track_service
        self.sequence_service = sequence_service
        self._alignment_reader = alignment_reader

    def __enter__(self) -> Data:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the annotation and sequence services."""
        if self.track_service is not None:
            self.track_service.close()
        if self.sequence_service is not None:
            self.sequence_service.close()

    def handle_data_messages(self, data_messages: Iterable[DataMessage]) -> bool:
        """Handle messages in order; return whether the last one loaded data."""
        loaded_data = False
        for data_message in data_messages:
            loaded_data = self.handle_data_message(data_message)
        return loaded_data

    def handle_data_message(self, data_message: DataMessage) -> bool:
        """Load what the message asks for, if missing; return whether it loaded."""
        region = data_message.region
        kind = data_message.kind

        if kind is DataKind.REQUIRES_COMPLETE_ALIGNMENTS:
            if self.bam_path is None:
                raise TGVIOError("BAM file not found")
            if self.has_complete_alignment(region):
                return False
            self.alignment = self._read_alignment(region)
            return True

        if kind is DataKind.REQUIRES_COMPLETE_FEATURES:
            if self.track_service is None:
                raise TGVIOError("Track service not found")
            if self.has_complete_track(region):
                return False
            self.track = self.track_service.query_feature_track(region)
            return True

        if self.sequence_service is None:
            raise TGVIOError("Sequence service not found")
        if self.has_complete_sequence(region):
            return False
        try:
            self.sequence = self.sequence_service.query_sequence(region)
        except TGVError as e:
            raise TGVIOError("Sequence service error") from e
        return True

    def _read_alignment(self, region: Region) -> Alignment:
        assert self.bam_path is not None
        if self.bai_path is not None and is_url(self.bam_path):
            raise TGVIOError("Remote BAM files are not supported yet.")
        if self._alignment_reader is None:
            raise TGVIOError("No alignment reader configured")
        return self._alignment_reader(self.bam_path, self.bai_path, region)

    def load_all_data(self, region: Region) -> bool:
        """Load alignments, features and sequence for ``region``."""
        loaded_alignment = self.handle_data_message(
            DataMessage(DataKind.REQUIRES_COMPLETE_ALIGNMENTS, region)
        )
        loaded_track = self.handle_data_message(
            DataMessage(DataKind.REQUIRES_COMPLETE_FEATURES, region)
        )
        loaded_sequence = self.handle_data_message(
            DataMessage(DataKind.REQUIRES_COMPLETE_SEQUENCES, region)
        )
        return loaded_alignment or loaded_track or loaded_sequence

    def has_complete_alignment(self, region: Region) -> bool:
        return self.alignment is not None and self.alignment.has_complete_data(region)

    def has_complete_track(self, region: Region) -> bool:
        return self.track is not None and self.track.has_complete_data(region)

    def has_complete_sequence(self, region: Region) -> bool:
        return self.sequence is not None and self.sequence.has_complete_data(region)
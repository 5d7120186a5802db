"""Gene annotation tracks and navigation over genes and exons."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tgv.contig import Contig
from tgv.region import Region
from tgv.strand import Strand

_NO_LEFT_BOUND = 2**64 - 1


class FeatureType(enum.Enum):
    EXON = "exon"
    INTRON = "intron"
    NON_CDS_EXON = "non_cds_exon"


@dataclass(frozen=True)
class Feature:
    """An interval on a contig; ``start`` and ``end`` are 1-based."""

    contig: Contig
    start: int
    end: int
    feature_type: FeatureType


class _ExonPosition(enum.Enum):
    PRE_CDS = "pre_cds"
    CDS = "cds"
    POST_CDS = "post_cds"


@dataclass
class Gene:
    """A transcript with its exons; coordinates are 1-based."""

    id: str
    name: str
    strand: Strand
    contig: Contig
    transcription_start: int
    transcription_end: int
    cds_start: int
    cds_end: int
    exon_starts: list[int] = field(default_factory=list)
    exon_ends: list[int] = field(default_factory=list)

    def start(self) -> int:
        return self.transcription_start

    def end(self) -> int:
        return self.transcription_end

    def covers(self, position: int) -> bool:
        """Whether ``position`` lies within the transcribed region."""
        return self.start() <= position <= self.end()

    def get_exon(self, idx: int) -> Feature | None:
        """The exon at index ``idx``, or None if there is no such exon."""
        if idx < 0 or idx >= len(self.exon_starts):
            return None
        return Feature(
            self.contig, self.exon_starts[idx], self.exon_ends[idx], FeatureType.EXON
        )

    def n_exons(self) -> int:
        return len(self.exon_starts)

    def _classify(self, coordinate: int) -> _ExonPosition:
        if coordinate < self.cds_start:
            return _ExonPosition.PRE_CDS
        if coordinate <= self.cds_end:
            return _ExonPosition.CDS
        return _ExonPosition.POST_CDS

    def features(self) -> list[tuple[int, int, FeatureType, int]]:
        """Exons, introns and untranslated parts as ``(start, end, type, number)``.

        Coding exons and introns are numbered from 1 in transcription order;
        untranslated parts get number 0.
        """
        pre, cds, post = (
            _ExonPosition.PRE_CDS,
            _ExonPosition.CDS,
            _ExonPosition.POST_CDS,
        )
        parts: list[tuple[int, int, FeatureType]] = []
        last_exon_end = self.transcription_start
        n_cds_exons = 0
        n_introns = 0

        for exon_start, exon_end in zip(self.exon_starts, self.exon_ends):
            if exon_start > last_exon_end:
                parts.append((last_exon_end + 1, exon_start, FeatureType.INTRON))
                n_introns += 1

            positions = (self._classify(exon_start), self._classify(exon_end))
            if positions == (pre, pre) or positions == (post, post):
                parts.append((exon_start, exon_end, FeatureType.NON_CDS_EXON))
                n_cds_exons += 1
            elif positions == (pre, cds):
                parts.append((exon_start, self.cds_start - 1, FeatureType.NON_CDS_EXON))
                parts.append((self.cds_start, exon_end, FeatureType.EXON))
                n_cds_exons += 1
            elif positions == (pre, post):
                parts.append((exon_start, self.cds_start - 1, FeatureType.NON_CDS_EXON))
                parts.append((self.cds_start, self.cds_end, FeatureType.EXON))
                parts.append((self.cds_end + 1, exon_end, FeatureType.NON_CDS_EXON))
                n_cds_exons += 1
            elif positions == (cds, cds):
                parts.append((exon_start, exon_end, FeatureType.EXON))
                n_cds_exons += 1
            elif positions == (cds, post):
                parts.append((exon_start, self.cds_end, FeatureType.EXON))
                parts.append((self.cds_end + 1, exon_end, FeatureType.NON_CDS_EXON))
                n_cds_exons += 1

            last_exon_end = exon_end

        forward = self.strand is Strand.FORWARD
        output: list[tuple[int, int, FeatureType, int]] = []
        i_cds_exon = 0
        i_intron = 0
        for start, end, feature_type in parts:
            if feature_type is FeatureType.EXON:
                number = i_cds_exon + 1 if forward else n_cds_exons - i_cds_exon
                i_cds_exon += 1
            elif feature_type is FeatureType.INTRON:
                number = i_intron + 1 if forward else n_introns - i_intron
                i_intron += 1
            else:
                number = 0
            output.append((start, end, feature_type, number))
        return output


class Track:
    """Genes on a single contig, sorted by start, assumed not to overlap."""

    def __init__(self, genes: list[Gene], contig: Contig) -> None:
        self.genes: list[Gene] = sorted(genes, key=lambda gene: gene.start())
        self.contig = contig
        self._left_bound = min(
            (gene.start() for gene in self.genes), default=_NO_LEFT_BOUND
        )
        self._right_bound = max((gene.end() for gene in self.genes), default=0)
        self._exons: list[Feature] = [
            exon
            for gene in self.genes
            for exon in (gene.get_exon(i) for i in range(gene.n_exons()))
            if exon is not None
        ]

    @classmethod
    def from_genes(cls, genes: list[Gene], contig: Contig) -> Track:
        """Build a track from genes in any order."""
        return cls(list(genes), contig)

    def start(self) -> int:
        """Leftmost gene start, 1-based."""
        return self._left_bound

    def end(self) -> int:
        """Rightmost gene end, 1-based."""
        return self._right_bound

    def is_empty(self) -> bool:
        return not self.genes

    def contains(self, region: Region) -> bool:
        """Whether ``region`` lies within the span of the track."""
        return (
            region.contig == self.contig
            and region.start >= self.start()
            and region.end <= self.end()
        )

    def has_complete_data(self, region: Region) -> bool:
        """Whether the loaded track covers ``region``."""
        return self.contains(region)

    # Genes

    def get_gene_at(self, position: int) -> Gene | None:
        """The gene covering ``position``, if any."""
        return next((gene for gene in self.genes if gene.covers(position)), None)

    def get_k_genes_before(self, position: int, k: int) -> Gene | None:
        """The k-th gene before ``position``; k = 0 means the gene at it."""
        if k == 0:
            return self.get_gene_at(position)
        if not self.genes or position < self._left_bound:
            return None
        if position > self._right_bound:
            if len(self.genes) < k:
                return None
            return self.genes[len(self.genes) - k]
        for i, gene in enumerate(self.genes):
            if gene.end() < position:
                continue
            if i < k:
                return None
            return self.genes[i - k]
        return None

    def get_k_genes_after(self, position: int, k: int) -> Gene | None:
        """The k-th gene after ``position``; k = 0 means the gene at it."""
        if k == 0:
            return self.get_gene_at(position)
        if not self.genes or position > self._right_bound:
            return None
        if position < self._left_bound:
            if len(self.genes) < k:
                return None
            return self.genes[k - 1]
        for i, gene in enumerate(self.genes):
            if gene.start() <= position:
                continue
            if i + k > len(self.genes):
                return None
            return self.genes[i + k - 1]
        return None

    def get_saturating_k_genes_after(self, position: int, k: int) -> Gene | None:
        """Like get_k_genes_after, falling back to the last gene."""
        if k == 0 or not self.genes:
            return None
        gene = self.get_k_genes_after(position, k)
        return gene if gene is not None else self.genes[-1]

    def get_saturating_k_genes_before(self, position: int, k: int) -> Gene | None:
        """Like get_k_genes_before, falling back to the first gene."""
        if k == 0 or not self.genes:
            return None
        gene = self.get_k_genes_before(position, k)
        return gene if gene is not None else self.genes[0]

    # Exons

    def get_exon_at(self, position: int) -> Feature | None:
        """The exon covering ``position``, if any."""
        return next(
            (exon for exon in self._exons if exon.start <= position <= exon.end), None
        )

    def get_k_exons_before(self, position: int, k: int) -> Feature | None:
        """The k-th exon before ``position``; k = 0 means the exon at it."""
        if k == 0:
            return self.get_exon_at(position)
        if not self.genes or position < self._left_bound:
            return None
        if position > self._right_bound:
            if len(self._exons) < k:
                return None
            return self._exons[len(self._exons) - k]
        for i, exon in enumerate(self._exons):
            if exon.end < position:
                continue
            if i < k:
                return None
            return self._exons[i - k]
        return None

    def get_k_exons_after(self, position: int, k: int) -> Feature | None:
        """The k-th exon after ``position``; k = 0 means the exon at it."""
        if k == 0:
            return self.get_exon_at(position)
        if not self.genes or position > self._right_bound:
            return None
        if position < self._left_bound:
            if len(self._exons) < k:
                return None
            return self._exons[k - 1]
        for i, exon in enumerate(self._exons):
            if exon.start <= position:
                continue
            if i + k > len(self._exons):
                return None
            return self._exons[i + k - 1]
        return None

    def get_saturating_k_exons_after(self, position: int, k: int) -> Feature | None:
        """Like get_k_exons_after, falling back to the last exon."""
        if k == 0 or not self._exons:
            return None
        exon = self.get_k_exons_after(position, k)
        return exon if exon is not None else self._exons[-1]

    def get_saturating_k_exons_before(self, position: int, k: int) -> Feature | None:
        """Like get_k_exons_before, falling back to the first exon."""
        if k == 0 or not self._exons:
            return None
        exon = self.get_k_exons_before(position, k)
        return exon if exon is not None else self._exons[0]
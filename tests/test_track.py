import pytest

from tgv.contig import Contig
from tgv.region import Region
from tgv.strand import Strand
from tgv.track import Feature, FeatureType, Gene, Track


def _gene(name, start, end, cds_start, cds_end, exon_starts, exon_ends, strand=Strand.FORWARD):
    return Gene(
        id=name,
        name=name,
        strand=strand,
        contig=Contig.chrom("chr1"),
        transcription_start=start,
        transcription_end=end,
        cds_start=cds_start,
        cds_end=cds_end,
        exon_starts=list(exon_starts),
        exon_ends=list(exon_ends),
    )


def get_test_track():
    genes = [
        _gene("gene2", 41, 50, 45, 50, [41], [50]),
        _gene("gene1", 2, 10, 2, 10, [2, 8], [5, 10]),
        _gene("gene_no_exon", 21, 30, 25, 25, [], []),
    ]
    return Track.from_genes(genes, Contig.chrom("chr1"))


def _name(gene):
    return None if gene is None else gene.name


def _start(exon):
    return None if exon is None else exon.start


def test_genes_are_sorted_and_bounds_computed():
    track = get_test_track()
    assert [g.name for g in track.genes] == ["gene1", "gene_no_exon", "gene2"]
    assert track.start() == 2
    assert track.end() == 50
    assert not track.is_empty()


def test_empty_track():
    track = Track.from_genes([], Contig.chrom("chr1"))
    assert track.is_empty()
    assert track.get_k_genes_after(5, 1) is None
    assert track.get_saturating_k_genes_before(5, 1) is None
    assert track.get_saturating_k_exons_after(5, 1) is None
    assert not track.contains(Region(Contig.chrom("chr1"), 1, 2))


@pytest.mark.parametrize(
    "region, expected",
    [
        (Region(Contig.chrom("chr1"), 2, 50), True),
        (Region(Contig.chrom("chr1"), 10, 20), True),
        (Region(Contig.chrom("chr1"), 1, 10), False),
        (Region(Contig.chrom("chr1"), 40, 51), False),
        (Region(Contig.chrom("chr2"), 10, 20), False),
    ],
)
def test_contains_and_complete_data(region, expected):
    track = get_test_track()
    assert track.contains(region) is expected
    assert track.has_complete_data(region) is expected


@pytest.mark.parametrize(
    "position, expected",
    [(1, None), (2, "gene1"), (5, "gene1"), (10, "gene1"), (42, "gene2"), (51, None)],
)
def test_get_genes_at(position, expected):
    assert _name(get_test_track().get_gene_at(position)) == expected


@pytest.mark.parametrize(
    "position, k, expected",
    [
        (2, 0, "gene1"),
        (2, 1, None),
        (11, 1, "gene1"),
        (35, 1, "gene_no_exon"),
        (51, 0, None),
        (51, 1, "gene2"),
    ],
)
def test_get_k_genes_before(position, k, expected):
    assert _name(get_test_track().get_k_genes_before(position, k)) == expected


@pytest.mark.parametrize(
    "position, k, expected",
    [
        (2, 0, "gene1"),
        (2, 1, "gene_no_exon"),
        (2, 2, "gene2"),
        (2, 3, None),
        (11, 1, "gene_no_exon"),
        (51, 1, None),
        (1, 1, "gene1"),
        (1, 0, None),
    ],
)
def test_get_k_genes_after(position, k, expected):
    assert _name(get_test_track().get_k_genes_after(position, k)) == expected


def test_saturating_genes():
    track = get_test_track()
    assert track.get_saturating_k_genes_after(2, 3).name == "gene2"
    assert track.get_saturating_k_genes_after(2, 1).name == "gene_no_exon"
    assert track.get_saturating_k_genes_before(2, 1).name == "gene1"
    assert track.get_saturating_k_genes_after(2, 0) is None
    assert track.get_saturating_k_genes_before(2, 0) is None


@pytest.mark.parametrize(
    "position, expected", [(1, None), (5, 2), (15, None), (25, None), (51, None)]
)
def test_get_exon_at(position, expected):
    assert _start(get_test_track().get_exon_at(position)) == expected


@pytest.mark.parametrize(
    "position, k, expected",
    [(1, 0, None), (2, 0, 2), (2, 1, None), (35, 1, 8), (51, 1, 41), (51, 2, 8)],
)
def test_get_k_exons_before(position, k, expected):
    assert _start(get_test_track().get_k_exons_before(position, k)) == expected


@pytest.mark.parametrize(
    "position, k, expected",
    [
        (1, 0, None),
        (1, 2, 8),
        (2, 0, 2),
        (2, 1, 8),
        (35, 1, 41),
        (35, 2, None),
        (51, 0, None),
        (51, 1, None),
    ],
)
def test_get_k_exons_after(position, k, expected):
    assert _start(get_test_track().get_k_exons_after(position, k)) == expected


def test_saturating_exons():
    track = get_test_track()
    assert track.get_saturating_k_exons_after(35, 2).start == 41
    assert track.get_saturating_k_exons_before(2, 1).start == 2
    assert track.get_saturating_k_exons_after(35, 0) is None


def test_exon_feature_fields():
    exon = get_test_track().get_exon_at(9)
    assert exon == Feature(Contig.chrom("chr1"), 8, 10, FeatureType.EXON)


def test_gene_get_exon_and_count():
    gene = _gene("g", 2, 10, 2, 10, [2, 8], [5, 10])
    assert gene.n_exons() == 2
    assert gene.get_exon(1) == Feature(Contig.chrom("chr1"), 8, 10, FeatureType.EXON)
    assert gene.get_exon(2) is None
    assert gene.covers(10)
    assert not gene.covers(11)


def test_features_forward_strand():
    gene = _gene("g", 2, 10, 2, 10, [2, 8], [5, 10])
    assert gene.features() == [
        (2, 5, FeatureType.EXON, 1),
        (6, 8, FeatureType.INTRON, 1),
        (8, 10, FeatureType.EXON, 2),
    ]


def test_features_reverse_strand():
    gene = _gene("g", 2, 10, 2, 10, [2, 8], [5, 10], strand=Strand.REVERSE)
    assert gene.features() == [
        (2, 5, FeatureType.EXON, 2),
        (6, 8, FeatureType.INTRON, 1),
        (8, 10, FeatureType.EXON, 1),
    ]


def test_features_with_untranslated_parts():
    gene = _gene("g", 1, 20, 5, 15, [1, 12], [10, 20])
    assert gene.features() == [
        (1, 4, FeatureType.NON_CDS_EXON, 0),
        (5, 10, FeatureType.EXON, 1),
        (11, 12, FeatureType.INTRON, 1),
        (12, 15, FeatureType.EXON, 2),
        (16, 20, FeatureType.NON_CDS_EXON, 0),
    ]
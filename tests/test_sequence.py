from tgv.contig import Contig
from tgv.region import Region
from tgv.sequence import Sequence

CHR1 = Contig.chrom("1")


def make_sequence():
    return Sequence(start=101, sequence="ACGTACGTAC", contig=CHR1)


def test_end_and_length_are_consistent():
    seq = make_sequence()
    assert len(seq) == 10
    assert seq.end() - seq.start + 1 == len(seq)


def test_whole_range_returns_everything():
    seq = make_sequence()
    assert seq.get_sequence(Region(CHR1, seq.start, seq.end())) == seq.sequence


def test_single_base():
    seq = make_sequence()
    assert seq.get_sequence(Region(CHR1, 101, 101)) == "A"


def test_sub_range_length_matches_region():
    seq = make_sequence()
    region = Region(CHR1, 103, 107)
    result = seq.get_sequence(region)
    assert len(result) == region.length()
    assert result in seq.sequence


def test_outside_range_returns_none():
    seq = make_sequence()
    assert seq.get_sequence(Region(CHR1, 100, 105)) is None
    assert not seq.has_complete_data(Region(CHR1, 105, seq.end() + 1))


def test_other_contig_is_not_complete():
    seq = make_sequence()
    assert not seq.has_complete_data(Region(Contig.chrom("2"), 101, 102))
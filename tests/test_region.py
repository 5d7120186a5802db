import pytest

from tgv.contig import Contig
from tgv.errors import TGVValueError
from tgv.region import Region


def test_start_after_end_raises():
    with pytest.raises(TGVValueError):
        Region(Contig.chrom("1"), 20, 10)


def test_display_uses_full_name():
    region = Region(Contig.chrom("1"), 10, 20)
    assert str(region) == "chr1:10-20"


def test_single_base_region_has_length_one():
    assert Region(Contig.chrom("1"), 7, 7).length() == 1


def test_width_equals_length():
    region = Region(Contig.chrom("2"), 100, 250)
    assert region.width() == region.length()
    assert region.start + region.length() - 1 == region.end


def test_covers_bounds_inclusive():
    region = Region(Contig.chrom("3"), 5, 9)
    assert region.covers(5)
    assert region.covers(9)
    assert not region.covers(4)
    assert not region.covers(10)


def test_regions_compare_by_value():
    assert Region(Contig.chrom("X"), 1, 2) == Region(Contig.chrom("chrX"), 1, 2)
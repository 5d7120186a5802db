import pytest

from tgv.errors import ParsingError
from tgv.strand import Strand


def test_parse_forward():
    assert Strand.parse("+") is Strand.FORWARD


def test_parse_reverse():
    assert Strand.parse("-") is Strand.REVERSE


@pytest.mark.parametrize("strand", list(Strand))
def test_round_trip(strand):
    assert Strand.parse(strand.value) is strand


@pytest.mark.parametrize("text", ["", ".", "++", "forward"])
def test_invalid_strand_raises(text):
    with pytest.raises(ParsingError):
        Strand.parse(text)
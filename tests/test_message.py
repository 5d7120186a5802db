import pytest

from tgv.contig import Contig
from tgv.errors import TGVIOError
from tgv.message import DataKind, DataMessage, StateKind, StateMessage
from tgv.mode import InputMode
from tgv.region import Region

REFERENCE_KINDS = [
    StateKind.GOTO_NEXT_EXONS_START,
    StateKind.GOTO_NEXT_EXONS_END,
    StateKind.GOTO_PREVIOUS_EXONS_START,
    StateKind.GOTO_PREVIOUS_EXONS_END,
    StateKind.GOTO_NEXT_GENES_START,
    StateKind.GOTO_NEXT_GENES_END,
    StateKind.GOTO_PREVIOUS_GENES_START,
    StateKind.GOTO_PREVIOUS_GENES_END,
    StateKind.GO_TO_GENE,
]


@pytest.mark.parametrize("kind", REFERENCE_KINDS)
def test_gene_and_exon_navigation_requires_reference(kind):
    assert StateMessage(kind, 1).requires_reference()


@pytest.mark.parametrize(
    "kind", [k for k in StateKind if k not in REFERENCE_KINDS]
)
def test_other_messages_do_not_require_reference(kind):
    assert not StateMessage(kind).requires_reference()


def test_display_is_variant_name():
    assert str(StateMessage(StateKind.MOVE_LEFT, 3)) == "MoveLeft"
    assert str(StateMessage(StateKind.QUIT)) == "Quit"


def test_messages_compare_by_value():
    assert StateMessage(StateKind.GOTO_CONTIG_COORDINATE, ("chr1", 1000)) == StateMessage(
        StateKind.GOTO_CONTIG_COORDINATE, ("chr1", 1000)
    )
    assert StateMessage(StateKind.MOVE_LEFT, 1) != StateMessage(StateKind.MOVE_LEFT, 2)
    assert StateMessage(StateKind.SWITCH_MODE, InputMode.HELP) != StateMessage(
        StateKind.SWITCH_MODE, InputMode.NORMAL
    )


def test_error_messages_compare_errors():
    message = StateMessage(StateKind.ERROR, TGVIOError("x"))
    assert message == StateMessage(StateKind.ERROR, TGVIOError("x"))
    assert message != StateMessage(StateKind.ERROR, TGVIOError("y"))
    assert str(message) == "Error"
    assert not message.requires_reference()


def test_data_message_equality_and_display():
    region = Region(Contig.chrom("1"), 1, 10)
    message = DataMessage(DataKind.REQUIRES_COMPLETE_SEQUENCES, region)
    assert message == DataMessage(DataKind.REQUIRES_COMPLETE_SEQUENCES, region)
    assert message != DataMessage(DataKind.REQUIRES_COMPLETE_FEATURES, region)
    assert str(message) == "RequiresCompleteSequences"
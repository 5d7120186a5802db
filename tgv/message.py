"""Messages passed between input handling, state and data loading."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from tgv.region import Region


class StateKind(enum.Enum):
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_UP = "MoveUp"
    MOVE_DOWN = "MoveDown"

    GOTO_COORDINATE = "GotoCoordinate"
    GOTO_CONTIG = "GotoContig"
    GOTO_CONTIG_COORDINATE = "GotoContigCoordinate"

    GOTO_NEXT_EXONS_START = "GotoNextExonsStart"
    GOTO_NEXT_EXONS_END = "GotoNextExonsEnd"
    GOTO_PREVIOUS_EXONS_START = "GotoPreviousExonsStart"
    GOTO_PREVIOUS_EXONS_END = "GotoPreviousExonsEnd"
    GOTO_NEXT_GENES_START = "GotoNextGenesStart"
    GOTO_NEXT_GENES_END = "GotoNextGenesEnd"
    GOTO_PREVIOUS_GENES_START = "GotoPreviousGenesStart"
    GOTO_PREVIOUS_GENES_END = "GotoPreviousGenesEnd"

    GOTO_NEXT_CONTIG = "GotoNextContig"
    GOTO_PREVIOUS_CONTIG = "GotoPreviousContig"

    GO_TO_GENE = "GoToGene"
    GO_TO_DEFAULT = "GoToDefault"

    ZOOM_IN = "ZoomIn"
    ZOOM_OUT = "ZoomOut"

    SWITCH_MODE = "SwitchMode"

    ADD_CHAR_TO_NORMAL_MODE_REGISTERS = "AddCharToNormalModeRegisters"
    CLEAR_NORMAL_MODE_REGISTERS = "ClearNormalModeRegisters"
    NORMAL_MODE_REGISTER_ERROR = "NormalModeRegisterError"

    ADD_CHAR_TO_COMMAND_MODE_REGISTERS = "AddCharToCommandModeRegisters"
    CLEAR_COMMAND_MODE_REGISTERS = "ClearCommandModeRegisters"
    BACKSPACE_COMMAND_MODE_REGISTERS = "BackspaceCommandModeRegisters"
    MOVE_CURSOR_LEFT = "MoveCursorLeft"
    MOVE_CURSOR_RIGHT = "MoveCursorRight"
    COMMAND_MODE_REGISTER_ERROR = "CommandModeRegisterError"

    ERROR = "Error"

    QUIT = "Quit"


_REQUIRES_REFERENCE = frozenset(
    {
        StateKind.GOTO_NEXT_EXONS_START,
        StateKind.GOTO_NEXT_EXONS_END,
        StateKind.GOTO_PREVIOUS_EXONS_START,
        StateKind.GOTO_PREVIOUS_EXONS_END,
        StateKind.GOTO_NEXT_GENES_START,
        StateKind.GOTO_NEXT_GENES_END,
        StateKind.GOTO_PREVIOUS_GENES_START,
        StateKind.GOTO_PREVIOUS_GENES_END,
        StateKind.GO_TO_GENE,
    }
)


@dataclass(frozen=True)
class StateMessage:
    """A request to change the viewer state.

    ``value`` holds the payload of the message: a count, a name, an
    ``(contig name, coordinate)`` pair, an input mode, a character or an
    error, depending on ``kind``. Messages without payload leave it as None.
    """

    kind: StateKind
    value: Any = None

    def __str__(self) -> str:
        return self.kind.value

    def requires_reference(self) -> bool:
        """Whether handling the message needs a reference genome."""
        return self.kind in _REQUIRES_REFERENCE


class DataKind(enum.Enum):
    REQUIRES_COMPLETE_ALIGNMENTS = "RequiresCompleteAlignments"
    REQUIRES_COMPLETE_FEATURES = "RequiresCompleteFeatures"
    REQUIRES_COMPLETE_SEQUENCES = "RequiresCompleteSequences"


@dataclass(frozen=True)
class DataMessage:
    """A request that data for ``region`` be loaded."""

    kind: DataKind
    region: Region

    def __str__(self) -> str:
        return self.kind.value
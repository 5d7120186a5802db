"""Key registers that turn keystrokes into state messages."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from tgv.errors import ParsingError
from tgv.message import StateKind, StateMessage
from tgv.mode import InputMode

_USIZE_RE = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


class Key(enum.Enum):
    """Non-character keys. Character keys are passed as one-character strings."""

    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    DELETE = "Delete"
    INSERT = "Insert"
    ESC = "Esc"

    def __str__(self) -> str:
        return self.value


def _parse_count(s: str) -> int | None:
    """Parse a non-negative integer the strict way, or return None."""
    if not _USIZE_RE.fullmatch(s):
        return None
    n = int(s)
    return n if n <= _USIZE_MAX else None


def _is_count(s: str) -> bool:
    return _parse_count(s) is not None


_SMALL_HORIZONTAL_STEP = 1
_LARGE_HORIZONTAL_STEP = 30
_SMALL_VERTICAL_STEP = 1
_ZOOM_STEP = 2

# Checked in order; the first suffix that matches wins.
_MOVEMENTS: dict[str, tuple[StateKind, int]] = {
    "ge": (StateKind.GOTO_PREVIOUS_EXONS_END, 1),
    "gE": (StateKind.GOTO_PREVIOUS_GENES_END, 1),
    "w": (StateKind.GOTO_NEXT_EXONS_START, 1),
    "b": (StateKind.GOTO_PREVIOUS_EXONS_START, 1),
    "e": (StateKind.GOTO_NEXT_EXONS_END, 1),
    "W": (StateKind.GOTO_NEXT_GENES_START, 1),
    "B": (StateKind.GOTO_PREVIOUS_GENES_START, 1),
    "E": (StateKind.GOTO_NEXT_GENES_END, 1),
    "h": (StateKind.MOVE_LEFT, _SMALL_HORIZONTAL_STEP),
    "l": (StateKind.MOVE_RIGHT, _SMALL_HORIZONTAL_STEP),
    "j": (StateKind.MOVE_DOWN, _SMALL_VERTICAL_STEP),
    "k": (StateKind.MOVE_UP, _SMALL_VERTICAL_STEP),
    "y": (StateKind.MOVE_LEFT, _LARGE_HORIZONTAL_STEP),
    "p": (StateKind.MOVE_RIGHT, _LARGE_HORIZONTAL_STEP),
    "z": (StateKind.ZOOM_IN, _ZOOM_STEP),
    "o": (StateKind.ZOOM_OUT, _ZOOM_STEP),
    "{": (StateKind.GOTO_PREVIOUS_CONTIG, 1),
    "}": (StateKind.GOTO_NEXT_CONTIG, 1),
}

_CLEAR_NORMAL = StateMessage(StateKind.CLEAR_NORMAL_MODE_REGISTERS)


@dataclass
class NormalModeRegister:
    """Keys typed so far in normal mode, such as ``"3"`` or ``"g"``."""

    input: str = ""

    def add_char(self, c: str) -> None:
        self.input += c

    def clear(self) -> None:
        self.input = ""

    def translate(self, key: Key | str) -> list[StateMessage]:
        """Translate a key into state messages without changing the register.

        Raises ParsingError when the key sequence is not valid.
        """
        if isinstance(key, Key):
            raise ParsingError(f"Invalid input: {self.input}{key}")

        c = key
        if c in "123456789g" and len(c) == 1:
            if not self.input or _is_count(self.input):
                return [StateMessage(StateKind.ADD_CHAR_TO_NORMAL_MODE_REGISTERS, c)]
            raise ParsingError(f"Invalid input: {self.input}")

        if c == "0":
            if not self.input:
                raise ParsingError("Empty input")
            if _is_count(self.input):
                return [StateMessage(StateKind.ADD_CHAR_TO_NORMAL_MODE_REGISTERS, "0")]
            raise ParsingError(f"Invalid input: {self.input}")

        string = self.input + c
        suffix = next((s for s in _MOVEMENTS if string.endswith(s)), None)
        if suffix is None:
            raise ParsingError(f"Invalid normal mode input: {string}")

        prefix = string[: len(string) - len(suffix)]
        if prefix:
            n_movements = _parse_count(prefix)
            if n_movements is None:
                raise ParsingError(f"Invalid normal mode input: {string}")
        else:
            n_movements = 1

        kind, step = _MOVEMENTS[suffix]
        return [StateMessage(kind, step * n_movements), _CLEAR_NORMAL]


@dataclass
class CommandModeRegister:
    """Text typed after ``:`` and the cursor position within it."""

    input: str = ""
    cursor_position: int = 0

    def clear(self) -> None:
        self.input = ""
        self.cursor_position = 0

    def add_char(self, c: str) -> None:
        """Insert ``c`` at the cursor and move the cursor past it."""
        pos = self.cursor_position
        self.input = self.input[:pos] + c + self.input[pos:]
        self.cursor_position += 1

    def backspace(self) -> None:
        """Delete the character before the cursor, if any."""
        if self.cursor_position > 0:
            pos = self.cursor_position
            self.input = self.input[: pos - 1] + self.input[pos:]
            self.cursor_position -= 1

    def move_cursor_left(self, by: int) -> None:
        self.cursor_position = max(self.cursor_position - by, 0)

    def move_cursor_right(self, by: int) -> None:
        self.cursor_position = min(self.cursor_position + by, len(self.input))

    def translate(self, key: Key | str) -> list[StateMessage]:
        """Translate an editing key into state messages."""
        if isinstance(key, str):
            return [StateMessage(StateKind.ADD_CHAR_TO_COMMAND_MODE_REGISTERS, key)]
        if key is Key.BACKSPACE:
            return [StateMessage(StateKind.BACKSPACE_COMMAND_MODE_REGISTERS)]
        if key is Key.LEFT:
            return [StateMessage(StateKind.MOVE_CURSOR_LEFT, 1)]
        if key is Key.RIGHT:
            return [StateMessage(StateKind.MOVE_CURSOR_RIGHT, 1)]
        raise ParsingError("Invalid input")

    def parse(self) -> list[StateMessage]:
        """Parse the typed command.

        ``q`` quits, ``h`` shows help, ``1234`` goes to a coordinate on the
        current contig, ``12:1234`` goes to a coordinate on contig 12, and any
        other single word is looked up as a gene name.
        """
        if self.input == "q":
            return [StateMessage(StateKind.QUIT)]
        if self.input == "h":
            return [StateMessage(StateKind.SWITCH_MODE, InputMode.HELP)]

        parts = self.input.split(":")
        if len(parts) == 1:
            n = _parse_count(parts[0])
            if n is not None:
                return [StateMessage(StateKind.GOTO_COORDINATE, n)]
            return [StateMessage(StateKind.GO_TO_GENE, parts[0])]
        if len(parts) == 2:
            n = _parse_count(parts[1])
            if n is not None:
                return [StateMessage(StateKind.GOTO_CONTIG_COORDINATE, (parts[0], n))]
        raise ParsingError(f"Invalid command mode input: {self.input}")
"""Input modes of the viewer."""

import enum


class InputMode(enum.Enum):
    NORMAL = "Normal"
    COMMAND = "Command"
    HELP = "Help"

    def __str__(self) -> str:
        return self.value
"""DNA strand."""

from __future__ import annotations

import enum

from tgv.errors import ParsingError


class Strand(enum.Enum):
    FORWARD = "+"
    REVERSE = "-"

    @classmethod
    def parse(cls, s: str) -> Strand:
        """Parse ``"+"`` or ``"-"``."""
        try:
            return cls(s)
        except ValueError:
            raise ParsingError(f"Invalid strand: {s}") from None
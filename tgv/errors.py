"""Exception hierarchy used throughout the package."""

from __future__ import annotations


class TGVError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TGVError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def is_same_type(self, other: TGVError) -> bool:
        """Whether ``other`` is the same kind of error as this one."""
        return type(self) is type(other)


class CliError(TGVError):
    """Invalid command-line usage."""


class TGVIOError(TGVError):
    """Failure to read or fetch data."""


class StateError(TGVError):
    """The application state does not allow the requested action."""


class ParsingError(TGVError):
    """Input could not be parsed."""


class TGVValueError(TGVError):
    """A value is outside what is accepted."""
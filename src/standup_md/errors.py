"""Exceptions raised by the entry store."""

from pathlib import Path


class StandupError(Exception):
    """Base class for standup-md errors."""


class FormatError(StandupError):
    """Persisted standup text is malformed or ambiguous."""

    def __init__(
        self,
        message: str,
        source: Path | str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ):
        self.message = message
        self.source = source
        self.line_number = line_number
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        location = str(self.source) if self.source else "<text>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        text = f"{location}: {self.message}"
        if self.line is not None:
            text += f" ({self.line!r})"
        return text


class NotFoundError(StandupError):
    """A required file, directory or entry could not be located."""


class ConfigError(StandupError, ValueError):
    """Invalid configuration value."""

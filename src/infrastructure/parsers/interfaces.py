"""Protocol interfaces for parsers."""

from typing import Protocol

from domain.models.commands import Command


class CommandParserProtocol(Protocol):
    """Protocol for command line parsing."""

    @classmethod
    def parse(cls, line: str) -> Command | None:
        """Parse one input line into a command."""
        ...


class ParsingError(ValueError):
    """Error parsing input."""

    pass

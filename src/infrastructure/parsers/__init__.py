"""Parsers for extracting commands from raw input."""

from .command_parser import CommandParser, CommandParsingError
from .interfaces import CommandParserProtocol, ParsingError

__all__ = [
    "CommandParser",
    "CommandParserProtocol",
    "CommandParsingError",
    "ParsingError",
]

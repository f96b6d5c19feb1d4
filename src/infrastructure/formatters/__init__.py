"""Output formatters."""

from .console import FROZEN_WARNING, ConsoleFormatter

__all__ = ["FROZEN_WARNING", "ConsoleFormatter"]

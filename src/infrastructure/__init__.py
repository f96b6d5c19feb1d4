"""Input parsing, output formatting and settings."""

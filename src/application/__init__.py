"""Application layer: command loop and CLI."""

"""Frontend interfaces for the Game of Life board."""

from .cli import CLIGameOfLife, main

__all__ = ["CLIGameOfLife", "main"]

"""Solved programming drills: text puzzles, arithmetic and grid searches, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]
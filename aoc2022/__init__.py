"""Solutions to a set of 2022 programming puzzles, one module per day."""

__version__ = "0.1.0"
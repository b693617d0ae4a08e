"""Two-player terminal tic-tac-toe where bigger pieces capture smaller ones."""

__version__ = "0.1.0"
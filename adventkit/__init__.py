"""Solvers for daily programming puzzles from three seasons, one module per day."""

__version__ = "0.1.0"
"""Solvers for daily programming puzzles, one module per day (day01, day10 to day17)."""

__version__ = "0.1.0"
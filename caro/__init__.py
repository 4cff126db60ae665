"""Caro: a terminal board game of marks in a row, with two-player and bot modes."""

__version__ = "1.0.0"
__all__ = ["__version__"]
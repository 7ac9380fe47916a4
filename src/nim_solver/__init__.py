"""Nim against a perfect-play minimax AI."""

__version__ = "0.1.0"

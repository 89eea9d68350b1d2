"""Persistent storage for Falling Blocks."""

from .highscores import HighScoreTable, DEFAULT_CAPACITY

__all__ = ["HighScoreTable", "DEFAULT_CAPACITY"]

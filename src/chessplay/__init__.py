"""Chessplay: notation normalization and move resolution for game playback."""

__version__ = "0.1.0"

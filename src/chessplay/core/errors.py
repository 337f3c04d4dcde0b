"""Notation and resolution errors."""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for everything the engine rejects as bad input."""


class MalformedBoard(NotationError):
    """Board section is not 8 ranks of exactly 8 files of known letters."""


class MalformedRecord(NotationError):
    """Record header (side, castling, en passant, clocks) is unusable."""


class UnresolvedMove(NotationError):
    """A move token could not be mapped to any legal candidate."""

    def __init__(self, index: int, token: str) -> None:
        super().__init__(f"Unresolved move at index {index}: {token!r}")
        self.index = index
        self.token = token

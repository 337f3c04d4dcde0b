"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from chessplay.core.enums import Alphabet, CastlingRights, Color
from chessplay.core.position import Position
from chessplay.core.types import Square


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Authoritative parse result of one FEN-like record."""

    position: Position
    active_color: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.NONE
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    moves: tuple[str, ...] = ()
    alphabet: Alphabet = Alphabet.STANDARD


@dataclass(frozen=True, slots=True)
class ParsedRecord:
    """Validity-flagged wrapper used by callers that must not raise."""

    is_valid: bool
    record: GameRecord | None = None
    error: str | None = None

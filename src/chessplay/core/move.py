"""Move detail records handed to playback consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chessplay.core.enums import Color
from chessplay.core.piece import Piece
from chessplay.core.types import Square


@dataclass(frozen=True, slots=True)
class SecondaryMove:
    """Piece relocation bundled with a primary move (the rook when castling)."""

    from_sq: Square
    to_sq: Square
    piece: Piece

    def to_dict(self) -> dict[str, str]:
        return {"from": self.from_sq.name, "to": self.to_sq.name, "piece": str(self.piece)}


@dataclass(frozen=True, slots=True)
class MoveDetail:
    """One resolved ply: which piece travelled from where to where."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    secondary: SecondaryMove | None = None

    def __str__(self) -> str:
        return f"{self.piece}{self.from_sq}{self.to_sq}"

    @property
    def is_castling(self) -> bool:
        return self.secondary is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data: dict[str, Any] = {
            "from": self.from_sq.name,
            "to": self.to_sq.name,
            "piece": str(self.piece),
        }
        if self.secondary is not None:
            data["secondaryMove"] = self.secondary.to_dict()
        return data


@dataclass(frozen=True, slots=True)
class MoveFailure:
    """A ply whose token did not resolve against the position it was played in."""

    index: int
    token: str
    color: Color

"""Piece value object and its two letter alphabets."""

from __future__ import annotations

from dataclasses import dataclass

from chessplay.core.enums import Alphabet, Color, PieceType

# Uppercase letter per piece type; lowercase encodes the black piece.
_STANDARD_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

# Pion, Cavalier, Fou, Tour, Dame, Roi
_FRENCH_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "C",
    PieceType.BISHOP: "F",
    PieceType.ROOK: "T",
    PieceType.QUEEN: "D",
    PieceType.KING: "R",
}


def _char_map(letters: dict[PieceType, str]) -> dict[str, tuple[Color, PieceType]]:
    chars: dict[str, tuple[Color, PieceType]] = {}
    for ptype, letter in letters.items():
        chars[letter] = (Color.WHITE, ptype)
        chars[letter.lower()] = (Color.BLACK, ptype)
    return chars


_CHAR_MAPS: dict[Alphabet, dict[str, tuple[Color, PieceType]]] = {
    Alphabet.STANDARD: _char_map(_STANDARD_LETTERS),
    Alphabet.FRENCH: _char_map(_FRENCH_LETTERS),
}

_LETTERS: dict[Alphabet, dict[PieceType, str]] = {
    Alphabet.STANDARD: _STANDARD_LETTERS,
    Alphabet.FRENCH: _FRENCH_LETTERS,
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


def _concrete(alphabet: Alphabet) -> Alphabet:
    if alphabet is Alphabet.AUTO:
        raise ValueError("A concrete alphabet is required for single letters")
    return alphabet


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Standard letter (uppercase = white, lowercase = black)."""
        return self.char()

    def char(self, alphabet: Alphabet = Alphabet.STANDARD) -> str:
        """Letter for this piece in *alphabet*, e.g. white queen → 'D' in French."""
        letter = _LETTERS[_concrete(alphabet)][self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str, alphabet: Alphabet = Alphabet.STANDARD) -> Piece:
        """Create piece from a letter, e.g. 'N' → white knight, 'c' (French) → black knight."""
        try:
            color, ptype = _CHAR_MAPS[_concrete(alphabet)][char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def is_white(self) -> bool:
        return self.color == Color.WHITE

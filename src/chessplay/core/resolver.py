"""Resolve an algebraic move token against a position.

Given the board, a token such as ``Nf3``, ``Rad1``, ``exd5`` or ``O-O`` and the
side to move, find the single (from, to, piece) triple the token denotes.

Resolution is deliberately simple: the first candidate, in position
iteration order, that passes :func:`is_legal_move` wins. A token that fails
to name a unique piece (as real notation always would) is therefore settled
by board order rather than rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from chessplay.core.enums import Alphabet, Color, PieceType
from chessplay.core.move import MoveDetail, SecondaryMove
from chessplay.core.notation.moves import (
    CASTLE_KINGSIDE,
    CASTLE_QUEENSIDE,
    normalize_move_token,
)
from chessplay.core.piece import Piece
from chessplay.core.position import Position
from chessplay.core.rules import is_legal_move
from chessplay.core.types import Square, is_valid_square_name

_LOGGER = logging.getLogger(__name__)

_ANNOTATION_RE = re.compile(r"[+#!?]")

_TOKEN_PIECES: dict[str, PieceType] = {
    "K": PieceType.KING,
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}


@dataclass(frozen=True, slots=True)
class MoveToken:
    """A move token split into piece type, disambiguation and target."""

    piece_type: PieceType
    target: str
    disambiguation: str = ""
    capture: bool = False


def split_token(token: str) -> MoveToken:
    """Split a standard-alphabet, annotation-free token.

    ``Nbd2`` → knight, ``b``, ``d2``; ``exd5`` → pawn, ``e``, ``d5``. The
    target is returned as text and may not be a real square.
    """
    if token[:1] in _TOKEN_PIECES:
        piece_type = _TOKEN_PIECES[token[0]]
        rest = token[1:]
    else:
        piece_type = PieceType.PAWN
        rest = token

    if "x" in rest:
        parts = rest.split("x")
        return MoveToken(piece_type, parts[1], disambiguation=parts[0], capture=True)
    if len(rest) > 2:
        return MoveToken(piece_type, rest[-2:], disambiguation=rest[:-2])
    return MoveToken(piece_type, rest)


def castling_move(token: str, color: Color) -> MoveDetail:
    """King move and rook relocation for ``O-O`` / ``O-O-O``.

    Presence of the king and rook and an empty path are not checked.
    """
    rank = 0 if color == Color.WHITE else 7
    king = Piece(color, PieceType.KING)
    rook = Piece(color, PieceType.ROOK)
    if token == CASTLE_KINGSIDE:
        king_to, rook_from, rook_to = 6, 7, 5
    else:
        king_to, rook_from, rook_to = 2, 0, 3
    return MoveDetail(
        Square(4, rank),
        Square(king_to, rank),
        king,
        SecondaryMove(Square(rook_from, rank), Square(rook_to, rank), rook),
    )


def find_candidates(position: Position, piece: Piece, disambiguation: str = "") -> list[Square]:
    """Squares holding *piece* whose name contains *disambiguation*.

    Containment is loose: ``"1"`` keeps every square on rank 1 and ``"a"``
    every square on the a-file.
    """
    squares = position.pieces(piece)
    if disambiguation:
        squares = [sq for sq in squares if disambiguation in sq.name]
    return squares


def resolve_move(
    position: Position,
    token: str,
    color: Color,
    *,
    alphabet: Alphabet = Alphabet.AUTO,
) -> MoveDetail | None:
    """Resolve *token* for the side *color*; ``None`` when nothing can play it."""
    if token in (CASTLE_KINGSIDE, CASTLE_QUEENSIDE):
        return castling_move(token, color)

    clean = _ANNOTATION_RE.sub("", normalize_move_token(token, alphabet))
    if not clean:
        return None

    parsed = split_token(clean)
    if not is_valid_square_name(parsed.target):
        _LOGGER.debug("Token %r has no target square", token)
        return None
    target = Square.parse(parsed.target)

    piece = Piece(color, parsed.piece_type)
    for sq in find_candidates(position, piece, parsed.disambiguation):
        if is_legal_move(sq, target, piece, position):
            return MoveDetail(sq, target, piece)

    _LOGGER.debug("No %s %s can play %r", color, parsed.piece_type.name.lower(), token)
    return None

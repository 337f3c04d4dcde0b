"""Simplified legality primitives used to pick the piece a token refers to.

These checks look at piece geometry and blocking only. They deliberately do
not know about check, castling paths, en passant or promotion.
"""

from __future__ import annotations

from collections.abc import Mapping

from chessplay.core.enums import Color, PieceType
from chessplay.core.piece import Piece
from chessplay.core.types import Square


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_piece_between(from_sq: Square, to_sq: Square, position: Mapping[Square, Piece]) -> bool:
    """Whether any square strictly between *from_sq* and *to_sq* is occupied.

    The two squares must share a file, a rank or a diagonal.
    """
    d_file = to_sq.file - from_sq.file
    d_rank = to_sq.rank - from_sq.rank
    if d_file and d_rank and abs(d_file) != abs(d_rank):
        raise ValueError(f"{from_sq} and {to_sq} are not on a common line")

    step_file = _sign(d_file)
    step_rank = _sign(d_rank)
    file = from_sq.file + step_file
    rank = from_sq.rank + step_rank
    while (file, rank) != (to_sq.file, to_sq.rank):
        if Square(file, rank) in position:
            return True
        file += step_file
        rank += step_rank
    return False


def _is_straight(from_sq: Square, to_sq: Square) -> bool:
    return from_sq.file == to_sq.file or from_sq.rank == to_sq.rank


def _is_diagonal(from_sq: Square, to_sq: Square) -> bool:
    return abs(to_sq.file - from_sq.file) == abs(to_sq.rank - from_sq.rank)


def _is_pawn_move(
    from_sq: Square, to_sq: Square, piece: Piece, target: Piece | None, position: Mapping[Square, Piece]
) -> bool:
    forward = 1 if piece.color == Color.WHITE else -1
    start_rank = 1 if piece.color == Color.WHITE else 6
    d_rank = to_sq.rank - from_sq.rank

    if from_sq.file == to_sq.file and target is None:
        if d_rank == forward:
            return True
        if from_sq.rank == start_rank and d_rank == 2 * forward:
            return Square(from_sq.file, from_sq.rank + forward) not in position

    # Diagonal capture; a same-colour target was already rejected.
    return abs(to_sq.file - from_sq.file) == 1 and d_rank == forward and target is not None


def is_legal_move(
    from_sq: Square, to_sq: Square, piece: Piece, position: Mapping[Square, Piece]
) -> bool:
    """Whether *piece* standing on *from_sq* could move to *to_sq*."""
    target = position.get(to_sq)
    if target is not None and target.color == piece.color:
        return False

    d_file = abs(to_sq.file - from_sq.file)
    d_rank = abs(to_sq.rank - from_sq.rank)
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return _is_pawn_move(from_sq, to_sq, piece, target, position)
    if ptype == PieceType.ROOK:
        return _is_straight(from_sq, to_sq) and not is_piece_between(from_sq, to_sq, position)
    if ptype == PieceType.KNIGHT:
        return {d_file, d_rank} == {1, 2}
    if ptype == PieceType.BISHOP:
        return _is_diagonal(from_sq, to_sq) and not is_piece_between(from_sq, to_sq, position)
    if ptype == PieceType.QUEEN:
        return (
            _is_straight(from_sq, to_sq) or _is_diagonal(from_sq, to_sq)
        ) and not is_piece_between(from_sq, to_sq, position)
    if ptype == PieceType.KING:
        return d_file <= 1 and d_rank <= 1
    return False

"""Core domain layer — pure notation and move-resolution logic, no external dependencies.

Quick start::

    from chessplay.core import Color, Position, resolve_move

    pos = Position.initial()
    detail = resolve_move(pos, "Nf3", Color.WHITE)
    pos = pos.apply(detail)
"""

from chessplay.core.enums import Alphabet, CastlingRights, Color, PieceType
from chessplay.core.errors import (
    MalformedBoard,
    MalformedRecord,
    NotationError,
    UnresolvedMove,
)
from chessplay.core.move import MoveDetail, MoveFailure, SecondaryMove
from chessplay.core.notation import (
    FRENCH_STARTING_FEN,
    STARTING_FEN,
    GameRecord,
    ParsedRecord,
    decode_board,
    encode_board,
    is_french_alphabet,
    parse_pgn,
    parse_record,
    read_pgn,
    read_record,
    record_to_fen,
    to_french_alphabet,
    to_standard_alphabet,
    tokenize_moves,
)
from chessplay.core.piece import Piece
from chessplay.core.position import Position
from chessplay.core.resolver import resolve_move
from chessplay.core.rules import is_legal_move, is_piece_between
from chessplay.core.types import (
    Square,
    parse_square,
)

__all__ = [
    # Enums / flags
    "Alphabet",
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "MalformedBoard",
    "MalformedRecord",
    "NotationError",
    "UnresolvedMove",
    # Types / helpers
    "Square",
    "parse_square",
    # Domain objects
    "MoveDetail",
    "MoveFailure",
    "Piece",
    "Position",
    "SecondaryMove",
    # Rules / resolution
    "is_legal_move",
    "is_piece_between",
    "resolve_move",
    # Notation
    "FRENCH_STARTING_FEN",
    "STARTING_FEN",
    "GameRecord",
    "ParsedRecord",
    "decode_board",
    "encode_board",
    "is_french_alphabet",
    "parse_pgn",
    "parse_record",
    "read_pgn",
    "read_record",
    "record_to_fen",
    "to_french_alphabet",
    "to_standard_alphabet",
    "tokenize_moves",
]

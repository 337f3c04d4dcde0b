"""Notation package: piece alphabets, board codec, move tokens, records, PGN."""

from chessplay.core.notation.alphabet import (
    detect_alphabet,
    is_french_alphabet,
    piece_letter_to_standard,
    to_french_alphabet,
    to_standard_alphabet,
)
from chessplay.core.notation.fen import (
    FRENCH_STARTING_FEN,
    STARTING_FEN,
    decode_board,
    encode_board,
    movetext_from_tokens,
    parse_record,
    read_record,
    record_to_fen,
)
from chessplay.core.notation.models import GameRecord, ParsedRecord
from chessplay.core.notation.moves import (
    CASTLING_TOKENS,
    normalize_move_token,
    tokenize_moves,
)
from chessplay.core.notation.pgn import movetext_mainline, parse_pgn, read_pgn

__all__ = [
    "CASTLING_TOKENS",
    "FRENCH_STARTING_FEN",
    "STARTING_FEN",
    "GameRecord",
    "ParsedRecord",
    "detect_alphabet",
    "is_french_alphabet",
    "piece_letter_to_standard",
    "to_french_alphabet",
    "to_standard_alphabet",
    "decode_board",
    "encode_board",
    "movetext_from_tokens",
    "parse_record",
    "read_record",
    "record_to_fen",
    "normalize_move_token",
    "tokenize_moves",
    "movetext_mainline",
    "parse_pgn",
    "read_pgn",
]

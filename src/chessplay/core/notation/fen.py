"""Board codec and FEN-like record parsing.

A record is ``<board> <side> <castling> <en passant> [<halfmove> [<fullmove>]]``
optionally followed by a move list such as ``1.e4 e5 2.Nf3 Nc6``.
"""

from __future__ import annotations

import logging
import re

from chessplay.core.enums import Alphabet, CastlingRights, Color
from chessplay.core.errors import MalformedBoard, MalformedRecord, NotationError
from chessplay.core.notation.alphabet import resolve_alphabet, to_standard_alphabet
from chessplay.core.notation.models import GameRecord, ParsedRecord
from chessplay.core.notation.moves import (
    MOVE_NUMBER_RE,
    normalize_move_token,
    tokenize_moves,
)
from chessplay.core.piece import Piece
from chessplay.core.position import Position
from chessplay.core.types import Square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
FRENCH_STARTING_FEN = "tcfdrfct/pppppppp/8/8/8/8/PPPPPPPP/TCFDRFCT w RDrd - 0 1"

_EMPTY_RUNS = "12345678"
_CLOCK_RE = re.compile(r"-?[0-9]+")

_CASTLING_RIGHTS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


# ── Board section ────────────────────────────────────────────────────────────


def decode_board(board_section: str, *, alphabet: Alphabet = Alphabet.AUTO) -> Position:
    """Parse ``rnbqkbnr/pppppppp/8/...`` into a :class:`Position`.

    Ranks are read from rank 8 down; within a rank files run a → h.
    """
    ranks = board_section.split("/")
    if len(ranks) != 8:
        raise MalformedBoard(f"Invalid board (must contain 8 ranks): {board_section!r}")

    letters = resolve_alphabet(board_section, alphabet)
    squares: dict[Square, Piece] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUNS:
                file += int(ch)
            elif ch.isdigit():
                raise MalformedBoard(f"Invalid empty-square count {ch!r}: {board_section!r}")
            else:
                if file >= 8:
                    raise MalformedBoard(f"Too many pieces in rank {rank + 1}: {board_section!r}")
                try:
                    piece = Piece.from_char(ch, letters)
                except ValueError:
                    raise MalformedBoard(
                        f"Invalid piece character {ch!r}: {board_section!r}"
                    ) from None
                squares[Square(file, rank)] = piece
                file += 1
            if file > 8:
                raise MalformedBoard(f"Rank {rank + 1} is too long: {board_section!r}")
        if file != 8:
            raise MalformedBoard(f"Rank {rank + 1} is too short: {board_section!r}")

    return Position(squares)


def encode_board(position: Position, alphabet: Alphabet = Alphabet.STANDARD) -> str:
    """Serialise piece placement back to the slash-separated form."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = position.get(Square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.char(alphabet)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


# ── Header fields ────────────────────────────────────────────────────────────


def _parse_side(side_part: str) -> Color:
    if side_part == "w":
        return Color.WHITE
    if side_part == "b":
        return Color.BLACK
    raise MalformedRecord(f"Invalid side-to-move field: {side_part!r}")


def _parse_castling(castling_part: str, alphabet: Alphabet) -> CastlingRights:
    castling = CastlingRights.NONE
    if castling_part == "-":
        return castling
    # French boards write the king side as R (Roi) and the queen side as D (Dame).
    letters = to_standard_alphabet(castling_part, alphabet)
    seen: set[str] = set()
    for ch in letters:
        right = _CASTLING_RIGHTS.get(ch)
        if right is None or ch in seen:
            raise MalformedRecord(f"Invalid castling field: {castling_part!r}")
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(ep_part: str) -> Square | None:
    if ep_part == "-":
        return None
    try:
        return Square.parse(ep_part)
    except ValueError:
        raise MalformedRecord(f"Invalid en-passant square: {ep_part!r}") from None


def _is_counter(field: str) -> bool:
    return field.isascii() and field.isdigit()


def _take_counters(rest: list[str]) -> list[int]:
    """Pop up to two move counters off the front of *rest*.

    A clock-shaped field that is not a counter, or a stray field sitting in
    front of a clock-shaped one, is a broken clock rather than a move.
    """
    counters: list[int] = []
    while rest and len(counters) < 2:
        field = rest[0]
        if _is_counter(field):
            counters.append(int(rest.pop(0)))
            continue
        if _CLOCK_RE.fullmatch(field) or (len(rest) > 1 and _CLOCK_RE.fullmatch(rest[1])):
            raise MalformedRecord(f"Invalid move clock: {field!r}")
        break
    return counters


def _split_record(text: str) -> tuple[list[str], str]:
    """Header fields and the raw move section."""
    match = MOVE_NUMBER_RE.search(text)
    if match is None:
        return text.split(), ""
    return text[: match.start()].split(), text[match.start() :]


# ── Records ──────────────────────────────────────────────────────────────────


def read_record(text: str, *, alphabet: Alphabet = Alphabet.AUTO) -> GameRecord:
    """Parse a full record, raising :class:`NotationError` on bad input."""
    fields, move_section = _split_record(text.strip())
    if len(fields) < 4:
        raise MalformedRecord(f"Invalid record (need at least 4 fields): {text!r}")

    placement, side_part, castling_part, ep_part = fields[:4]
    board_alphabet = resolve_alphabet(placement, alphabet)
    position = decode_board(placement, alphabet=board_alphabet)
    side = _parse_side(side_part)
    castling = _parse_castling(castling_part, board_alphabet)
    en_passant = _parse_en_passant(ep_part)

    # Up to two counters; whatever follows them already belongs to the moves.
    rest = fields[4:]
    counters = _take_counters(rest)
    halfmove = counters[0] if counters else 0
    fullmove = counters[1] if len(counters) > 1 else 1
    if fullmove < 1:
        raise MalformedRecord(f"Invalid fullmove number: {fullmove}")

    if alphabet is Alphabet.AUTO and board_alphabet is Alphabet.STANDARD:
        token_alphabet = Alphabet.AUTO
    else:
        token_alphabet = board_alphabet
    tokens = tokenize_moves(" ".join([*rest, move_section]))
    moves = tuple(normalize_move_token(token, token_alphabet) for token in tokens)

    return GameRecord(
        position=position,
        active_color=side,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
        moves=moves,
        alphabet=board_alphabet,
    )


def parse_record(text: str, *, alphabet: Alphabet = Alphabet.AUTO) -> ParsedRecord:
    """Parse a record without raising; failures are reported on the result."""
    try:
        record = read_record(text, alphabet=alphabet)
    except NotationError as exc:
        _LOGGER.debug("Rejected record %r: %s", text, exc)
        return ParsedRecord(is_valid=False, error=str(exc))
    return ParsedRecord(is_valid=True, record=record)


def movetext_from_tokens(
    tokens: tuple[str, ...] | list[str],
    side: Color = Color.WHITE,
    fullmove_number: int = 1,
) -> str:
    """Number ply tokens, e.g. ``["e4", "e5"]`` → ``"1.e4 e5"``."""
    parts: list[str] = []
    number = fullmove_number
    color = side
    for ply, token in enumerate(tokens):
        if color == Color.WHITE:
            parts.append(f"{number}.{token}")
        elif ply == 0:
            parts.append(f"{number}...{token}")
        else:
            parts.append(token)
        if color == Color.BLACK:
            number += 1
        color = color.opposite
    return " ".join(parts)


def record_to_fen(record: GameRecord) -> str:
    """Serialise a :class:`GameRecord` back to a standard-alphabet record."""
    side_str = "w" if record.active_color == Color.WHITE else "b"

    castling_str = "".join(
        letter for letter, right in _CASTLING_RIGHTS.items() if record.castling & right
    ) or "-"

    ep_str = record.en_passant.name if record.en_passant is not None else "-"

    fen = (
        f"{encode_board(record.position)} {side_str} {castling_str} {ep_str} "
        f"{record.halfmove_clock} {record.fullmove_number}"
    )
    if record.moves:
        movetext = movetext_from_tokens(record.moves, record.active_color, record.fullmove_number)
        fen = f"{fen} {movetext}"
    return fen

"""PGN import: tag pairs plus mainline movetext into a :class:`GameRecord`."""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from chessplay.core.enums import Alphabet
from chessplay.core.errors import MalformedRecord, NotationError
from chessplay.core.notation.fen import STARTING_FEN, read_record
from chessplay.core.notation.models import GameRecord, ParsedRecord
from chessplay.core.notation.moves import normalize_move_token

_LOGGER = logging.getLogger(__name__)

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_PGN_RESULT_TOKENS = {"1-0", "0-1", "1/2-1/2", "*"}
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")


def _skip_to(movetext: str, start: int, closing: str) -> int:
    end = movetext.find(closing, start)
    return len(movetext) if end < 0 else end + 1


def movetext_mainline(movetext: str) -> list[str]:
    """Mainline ply tokens with comments, variations, NAGs and results removed."""
    tokens: list[str] = []
    variation_depth = 0
    idx = 0
    total = len(movetext)

    while idx < total:
        ch = movetext[idx]

        if ch.isspace():
            idx += 1
        elif ch == "{":
            idx = _skip_to(movetext, idx + 1, "}")
        elif ch == ";":
            idx = _skip_to(movetext, idx + 1, "\n")
        elif ch == "(":
            variation_depth += 1
            idx += 1
        elif ch == ")":
            variation_depth = max(0, variation_depth - 1)
            idx += 1
        elif ch == "}":
            idx += 1
        else:
            token_end = idx
            while (
                token_end < total
                and not movetext[token_end].isspace()
                and movetext[token_end] not in "{}();"
            ):
                token_end += 1
            token = movetext[idx:token_end]
            idx = token_end

            if variation_depth > 0 or token in _PGN_RESULT_TOKENS:
                continue
            if token.startswith("$") and token[1:].isdigit():
                continue
            # "1." stands alone or is glued to the move as in "1.e4" or "1...e5".
            token = _MOVE_NUMBER_RE.sub("", token)
            if token:
                tokens.append(token)

    return tokens


def read_pgn_headers(pgn_text: str) -> tuple[dict[str, str], str]:
    """Split a single-game PGN into its tag pairs and raw movetext."""
    headers: dict[str, str] = {}
    move_lines: list[str] = []
    in_headers = True

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            if in_headers and headers:
                in_headers = False
            continue

        if in_headers and line.startswith("["):
            match = _PGN_HEADER_RE.match(line)
            if match is None:
                raise MalformedRecord(f"Invalid PGN header line: {line}")
            key, raw_value = match.groups()
            headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            continue

        in_headers = False
        if line.startswith("%"):
            continue
        move_lines.append(line)

    return headers, "\n".join(move_lines)


def read_pgn(pgn_text: str, *, alphabet: Alphabet = Alphabet.AUTO) -> GameRecord:
    """Build a record from a PGN game; ``[FEN]`` overrides the start position."""
    headers, movetext = read_pgn_headers(pgn_text)
    record = read_record(headers.get("FEN", STARTING_FEN), alphabet=alphabet)

    if alphabet is Alphabet.AUTO and record.alphabet is Alphabet.STANDARD:
        token_alphabet = Alphabet.AUTO
    else:
        token_alphabet = record.alphabet
    moves = tuple(
        normalize_move_token(token, token_alphabet) for token in movetext_mainline(movetext)
    )
    return replace(record, moves=record.moves + moves)


def parse_pgn(pgn_text: str, *, alphabet: Alphabet = Alphabet.AUTO) -> ParsedRecord:
    """Parse a PGN game without raising; failures are reported on the result."""
    try:
        record = read_pgn(pgn_text, alphabet=alphabet)
    except NotationError as exc:
        _LOGGER.debug("Rejected PGN: %s", exc)
        return ParsedRecord(is_valid=False, error=str(exc))
    return ParsedRecord(is_valid=True, record=record)

"""Move-list tokenization and per-token alphabet normalization."""

from __future__ import annotations

import re

from chessplay.core.enums import Alphabet
from chessplay.core.notation.alphabet import piece_letter_to_standard

CASTLE_KINGSIDE = "O-O"
CASTLE_QUEENSIDE = "O-O-O"
CASTLING_TOKENS = frozenset({CASTLE_KINGSIDE, CASTLE_QUEENSIDE})

# "12." or "12..." at a word boundary; "a3." keeps its square.
MOVE_NUMBER_RE = re.compile(r"\b\d+\.+")

_FRENCH_LEADING = frozenset("RDTFC")


def tokenize_moves(move_section: str) -> list[str]:
    """Split a move list into ply tokens, dropping move-number markers."""
    if not move_section:
        return []
    return MOVE_NUMBER_RE.sub(" ", move_section).split()


def normalize_move_token(token: str, alphabet: Alphabet = Alphabet.AUTO) -> str:
    """Translate a French leading piece letter into the standard alphabet.

    Only an uppercase leading letter names a piece, so pawn moves such as
    ``c4`` or ``d5`` are never rewritten. Under ``AUTO`` a leading ``R`` is
    read as a rook because the glyph is shared with the French king.
    """
    if not token or token in CASTLING_TOKENS:
        return token
    lead = token[0]
    if lead not in _FRENCH_LEADING:
        return token
    return piece_letter_to_standard(lead, alphabet) + token[1:]

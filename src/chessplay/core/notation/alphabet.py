"""Conversion between the French (R, D, T, F, C, P) and standard piece letters.

The French king ``R`` and the standard rook ``R`` share a glyph, so a text is
classified once and then substituted in a single pass; never letter by letter
without knowing which alphabet the whole text uses.
"""

from __future__ import annotations

from chessplay.core.enums import Alphabet

# Letters that only exist in the French alphabet. R/r and P/p are ambiguous.
FRENCH_EXCLUSIVE = frozenset("DdTtFfCc")

_FRENCH_TO_STANDARD = str.maketrans("RDTFCrdtfc", "KQRBNkqrbn")
_STANDARD_TO_FRENCH = str.maketrans("KQRBNkqrbn", "RDTFCrdtfc")


def is_french_alphabet(board_section: str) -> bool:
    """Whether a board section contains any French-exclusive piece letter."""
    return any(ch in FRENCH_EXCLUSIVE for ch in board_section)


def detect_alphabet(board_section: str) -> Alphabet:
    return Alphabet.FRENCH if is_french_alphabet(board_section) else Alphabet.STANDARD


def resolve_alphabet(board_section: str, alphabet: Alphabet = Alphabet.AUTO) -> Alphabet:
    """Concrete alphabet for *board_section*, classifying it when asked to."""
    if alphabet is Alphabet.AUTO:
        return detect_alphabet(board_section)
    return alphabet


def to_standard_alphabet(text: str, alphabet: Alphabet = Alphabet.AUTO) -> str:
    """Rewrite *text* into standard letters when it is (or is declared) French."""
    if resolve_alphabet(text, alphabet) is Alphabet.FRENCH:
        return text.translate(_FRENCH_TO_STANDARD)
    return text


def to_french_alphabet(text: str) -> str:
    """Rewrite standard-alphabet *text* into French letters."""
    return text.translate(_STANDARD_TO_FRENCH)


def piece_letter_to_standard(letter: str, alphabet: Alphabet = Alphabet.FRENCH) -> str:
    """Convert one piece letter; letters without a French meaning pass through."""
    if alphabet is Alphabet.STANDARD:
        return letter
    if alphabet is Alphabet.AUTO and letter not in FRENCH_EXCLUSIVE:
        return letter
    return letter.translate(_FRENCH_TO_STANDARD)

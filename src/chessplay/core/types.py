"""Square value type and coordinate helpers.

Files and ranks are zero-based indexes:
    a1 = Square(0, 0), h1 = Square(7, 0), a8 = Square(0, 7), h8 = Square(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate, validated at construction."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Square out of board: file={self.file}, rank={self.rank}")

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(4, 3)."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(FILES.index(name[0]), RANKS.index(name[1]))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'e4'."""
        return FILES[self.file] + RANKS[self.rank]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name!r})"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4'."""
    return Square.parse(name)


def is_valid_square_name(name: str) -> bool:
    """Check whether *name* is a two-character square such as 'e4'."""
    return len(name) == 2 and name[0] in FILES and name[1] in RANKS


def as_square(value: Square | str) -> Square:
    """Accept either a :class:`Square` or its string name."""
    if isinstance(value, Square):
        return value
    return Square.parse(value)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))

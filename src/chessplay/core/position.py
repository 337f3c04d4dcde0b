"""Position — immutable square → piece mapping with copy-on-write moves."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chessplay.core.enums import Color, PieceType
from chessplay.core.move import MoveDetail
from chessplay.core.piece import Piece
from chessplay.core.types import Square, as_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Position(Mapping[Square, Piece]):
    """Occupied squares only; an absent key is an empty square.

    Iteration follows insertion order, which is what candidate lookup relies
    on. Every transition returns a new instance.
    """

    __slots__ = ("_squares",)

    def __init__(
        self,
        pieces: Mapping[Square, Piece] | Iterable[tuple[Square, Piece]] = (),
    ) -> None:
        self._squares: dict[Square, Piece] = dict(pieces)

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, sq: Square | str) -> Piece:
        try:
            key = as_square(sq)
        except ValueError:
            raise KeyError(sq) from None
        return self._squares[key]

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def __contains__(self, sq: object) -> bool:
        if isinstance(sq, (Square, str)):
            try:
                return as_square(sq) in self._squares
            except ValueError:
                return False
        return False

    def __hash__(self) -> int:
        return hash(frozenset(self._squares.items()))

    # -- Query helpers ------------------------------------------------------

    def is_empty(self, sq: Square | str) -> bool:
        return as_square(sq) not in self._squares

    def pieces(self, piece: Piece) -> list[Square]:
        """Squares holding *piece*, in iteration order."""
        return [sq for sq, occupant in self._squares.items() if occupant == piece]

    def to_dict(self) -> dict[str, str]:
        """Square name → standard piece letter."""
        return {sq.name: str(piece) for sq, piece in self._squares.items()}

    # -- Transitions --------------------------------------------------------

    def with_move(self, from_sq: Square, to_sq: Square, piece: Piece) -> Position:
        """Lift whatever stands on *from_sq*, capture on *to_sq*, place *piece*."""
        squares = self._squares.copy()
        squares.pop(from_sq, None)
        squares.pop(to_sq, None)
        squares[to_sq] = piece
        return Position(squares)

    def apply(self, detail: MoveDetail) -> Position:
        """Position after *detail* (and its secondary move, if any)."""
        nxt = self.with_move(detail.from_sq, detail.to_sq, detail.piece)
        if detail.secondary is not None:
            sec = detail.secondary
            nxt = nxt.with_move(sec.from_sq, sec.to_sq, sec.piece)
        return nxt

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Position:
        return cls()

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, rank 8 first as a FEN decode yields."""
        squares: dict[Square, Piece] = {}
        for f, pt in enumerate(_BACK_RANK):
            squares[Square(f, 7)] = Piece(Color.BLACK, pt)
        for f in range(8):
            squares[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for f in range(8):
            squares[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            squares[Square(f, 0)] = Piece(Color.WHITE, pt)
        return cls(squares)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares.get(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

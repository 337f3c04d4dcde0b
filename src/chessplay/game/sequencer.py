"""Fold a move list over a starting position."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from chessplay.core.enums import Alphabet, Color
from chessplay.core.errors import UnresolvedMove
from chessplay.core.move import MoveDetail, MoveFailure
from chessplay.core.position import Position
from chessplay.core.resolver import resolve_move

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PositionSequence:
    """Positions after each ply plus the move detail that produced them.

    ``positions`` and ``plies`` are aligned with the move list. A ply that
    did not resolve repeats the previous position and has ``None`` as its
    detail.
    """

    initial: Position
    positions: tuple[Position, ...] = ()
    plies: tuple[MoveDetail | None, ...] = ()
    failures: tuple[MoveFailure, ...] = ()

    @property
    def details(self) -> tuple[MoveDetail, ...]:
        """Details of the plies that resolved, in order."""
        return tuple(detail for detail in self.plies if detail is not None)

    @property
    def failed_indices(self) -> tuple[int, ...]:
        return tuple(failure.index for failure in self.failures)

    @property
    def frames(self) -> tuple[Position, ...]:
        """Initial position followed by every ply's position."""
        return (self.initial, *self.positions)

    @property
    def final(self) -> Position:
        return self.positions[-1] if self.positions else self.initial

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def error(self) -> str | None:
        if not self.failures:
            return None
        listed = ", ".join(f"{f.index}: {f.token}" for f in self.failures)
        return f"Some moves could not be played ({listed})"


def generate_positions(
    initial: Position,
    moves: Iterable[str],
    start_color: Color = Color.WHITE,
    *,
    alphabet: Alphabet = Alphabet.AUTO,
    strict: bool = False,
) -> PositionSequence:
    """Play *moves* from *initial*, alternating colours from *start_color*.

    A token that does not resolve is recorded as a failure and play carries
    on from the unchanged position; with ``strict`` it raises
    :class:`UnresolvedMove` instead.
    """
    positions: list[Position] = []
    plies: list[MoveDetail | None] = []
    failures: list[MoveFailure] = []
    current = initial
    color = start_color

    for index, token in enumerate(moves):
        detail = resolve_move(current, token, color, alphabet=alphabet)
        if detail is None:
            if strict:
                raise UnresolvedMove(index, token)
            _LOGGER.warning("Invalid move at index %d: %s (%s to move)", index, token, color)
            failures.append(MoveFailure(index, token, color))
        else:
            current = current.apply(detail)
        positions.append(current)
        plies.append(detail)
        color = color.opposite

    return PositionSequence(
        initial=initial,
        positions=tuple(positions),
        plies=tuple(plies),
        failures=tuple(failures),
    )

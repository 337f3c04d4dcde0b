"""End-to-end replay: record text in, position sequence out."""

from __future__ import annotations

from dataclasses import dataclass

from chessplay.core.enums import Alphabet
from chessplay.core.notation import parse_pgn, parse_record
from chessplay.core.notation.models import GameRecord, ParsedRecord
from chessplay.game.sequencer import PositionSequence, generate_positions


@dataclass(frozen=True, slots=True)
class ReplayResult:
    """Parse outcome plus the derived sequence when the record was valid."""

    is_valid: bool
    record: GameRecord | None = None
    sequence: PositionSequence | None = None
    error: str | None = None


def replay_game(record: GameRecord) -> PositionSequence:
    """Play a record's moves from its position, starting with its active colour."""
    # Record moves are already in the standard alphabet.
    return generate_positions(
        record.position,
        record.moves,
        record.active_color,
        alphabet=Alphabet.STANDARD,
    )


def _replay_parsed(parsed: ParsedRecord) -> ReplayResult:
    if not parsed.is_valid or parsed.record is None:
        return ReplayResult(is_valid=False, error=parsed.error)
    sequence = replay_game(parsed.record)
    return ReplayResult(
        is_valid=True,
        record=parsed.record,
        sequence=sequence,
        error=sequence.error,
    )


def replay_record(text: str, *, alphabet: Alphabet = Alphabet.AUTO) -> ReplayResult:
    """Parse a FEN-like record with moves and replay it; never raises for bad input."""
    return _replay_parsed(parse_record(text, alphabet=alphabet))


def replay_pgn(pgn_text: str, *, alphabet: Alphabet = Alphabet.AUTO) -> ReplayResult:
    """Parse a PGN game and replay its mainline; never raises for bad input."""
    return _replay_parsed(parse_pgn(pgn_text, alphabet=alphabet))

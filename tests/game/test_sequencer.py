"""Tests for folding move lists into position sequences."""

import pytest

from chessplay.core.enums import Alphabet, Color, PieceType
from chessplay.core.errors import UnresolvedMove
from chessplay.core.move import MoveFailure
from chessplay.core.notation import decode_board
from chessplay.core.piece import Piece
from chessplay.core.position import Position
from chessplay.core.types import A1, A8, C8, D8, E2, E4, E8, F1, F3, G1, H1, parse_square
from chessplay.game.sequencer import generate_positions

OPENING = ["e4", "e5", "Nf3", "Nc6"]


class TestGeneratePositions:
    def test_one_position_per_move(self, start: Position) -> None:
        seq = generate_positions(start, OPENING)
        assert len(seq.positions) == 4
        assert len(seq.details) == 4
        assert seq.ok
        assert seq.error is None

    def test_knight_developed(self, start: Position) -> None:
        third = generate_positions(start, OPENING).positions[2]
        assert third[F3] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert G1 not in third

    def test_initial_untouched(self, start: Position) -> None:
        generate_positions(start, OPENING)
        assert start == Position.initial()
        assert start[E2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_frames_include_initial(self, start: Position) -> None:
        seq = generate_positions(start, OPENING)
        assert len(seq.frames) == 5
        assert seq.frames[0] is start
        assert seq.final is seq.positions[-1]

    def test_empty_move_list(self, start: Position) -> None:
        seq = generate_positions(start, [])
        assert seq.positions == ()
        assert seq.final is start

    def test_start_with_black(self, start: Position) -> None:
        seq = generate_positions(start, ["e5", "e4"], Color.BLACK)
        assert seq.ok
        assert seq.details[0].piece == Piece(Color.BLACK, PieceType.PAWN)
        assert seq.positions[-1][E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_capture(self) -> None:
        pos = decode_board("rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR")
        seq = generate_positions(pos, ["exd5"])
        after = seq.positions[0]
        assert len(after) == 31
        assert after["d5"] == Piece(Color.WHITE, PieceType.PAWN)

    def test_castling_moves_rook(self, castling_ready: Position) -> None:
        seq = generate_positions(castling_ready, ["O-O", "O-O-O"])
        after = seq.positions[-1]
        assert after[G1] == Piece(Color.WHITE, PieceType.KING)
        assert after[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert H1 not in after
        assert after[C8] == Piece(Color.BLACK, PieceType.KING)
        assert after[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert A8 not in after
        assert E8 not in after
        assert after[A1] == Piece(Color.WHITE, PieceType.ROOK)
        assert all(detail.is_castling for detail in seq.details)

    def test_french_tokens(self, start: Position) -> None:
        french = generate_positions(start, ["e4", "e5", "Cf3", "Cc6"])
        standard = generate_positions(start, OPENING)
        assert french.positions == standard.positions


class TestFailedMoves:
    def test_failure_repeats_previous_position(self, kings_only: Position) -> None:
        seq = generate_positions(kings_only, ["Qh5", "Kd7", "Kd2"])
        assert len(seq.positions) == 3
        assert seq.positions[0] == kings_only
        assert seq.failed_indices == (0,)
        assert seq.failures == (MoveFailure(0, "Qh5", Color.WHITE),)
        assert seq.plies[0] is None
        assert len(seq.details) == 2

    def test_colour_flips_after_failure(self, kings_only: Position) -> None:
        seq = generate_positions(kings_only, ["Qh5", "Kd7"])
        assert seq.positions[1]["d7"] == Piece(Color.BLACK, PieceType.KING)

    def test_error_lists_failed_plies(self, start: Position) -> None:
        seq = generate_positions(start, ["e4", "Zz9", "Nf3", "Qh5"])
        assert not seq.ok
        assert seq.failed_indices == (1, 3)
        assert "1: Zz9" in (seq.error or "")
        assert seq.positions[-1][F3] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_failure_is_logged(self, kings_only: Position, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING", logger="chessplay.game.sequencer"):
            generate_positions(kings_only, ["Qh5"])
        assert "Qh5" in caplog.text

    def test_strict_raises(self, start: Position) -> None:
        with pytest.raises(UnresolvedMove) as excinfo:
            generate_positions(start, ["e4", "e4"], strict=True)
        assert excinfo.value.index == 1
        assert excinfo.value.token == "e4"


class TestDeterminism:
    def test_identical_runs(self, start: Position) -> None:
        moves = ["e4", "e5", "Nf3", "Nc6", "Bb5", "a6", "O-O", "Nf6", "Re1"]
        first = generate_positions(start, moves)
        second = generate_positions(start, moves)
        assert first == second
        assert [list(p.items()) for p in first.positions] == [
            list(p.items()) for p in second.positions
        ]

    def test_alphabet_forwarded(self, kings_only: Position) -> None:
        seq = generate_positions(kings_only, ["Rd2"], alphabet=Alphabet.FRENCH)
        assert seq.positions[0][parse_square("d2")] == Piece(Color.WHITE, PieceType.KING)

"""Tests for move-token resolution."""

import pytest

from chessplay.core.enums import Alphabet, Color, PieceType
from chessplay.core.move import MoveDetail, SecondaryMove
from chessplay.core.notation import decode_board
from chessplay.core.piece import Piece
from chessplay.core.position import Position
from chessplay.core.resolver import castling_move, find_candidates, resolve_move, split_token
from chessplay.core.types import A1, A8, C8, D8, E1, E8, F1, G1, H1, parse_square

W = Color.WHITE
B = Color.BLACK


class TestSplitToken:
    def test_piece_move(self) -> None:
        parsed = split_token("Nf3")
        assert parsed.piece_type == PieceType.KNIGHT
        assert parsed.target == "f3"
        assert parsed.disambiguation == ""
        assert not parsed.capture

    def test_disambiguated_piece_move(self) -> None:
        parsed = split_token("Rad1")
        assert parsed.piece_type == PieceType.ROOK
        assert parsed.disambiguation == "a"
        assert parsed.target == "d1"

    def test_square_disambiguation_with_capture(self) -> None:
        parsed = split_token("Qh4xe1")
        assert parsed.disambiguation == "h4"
        assert parsed.target == "e1"
        assert parsed.capture

    def test_pawn_capture(self) -> None:
        parsed = split_token("exd5")
        assert parsed.piece_type == PieceType.PAWN
        assert parsed.disambiguation == "e"
        assert parsed.target == "d5"


class TestCastling:
    def test_white_kingside(self) -> None:
        assert resolve_move(Position(), "O-O", W) == MoveDetail(
            E1,
            G1,
            Piece(W, PieceType.KING),
            SecondaryMove(H1, F1, Piece(W, PieceType.ROOK)),
        )

    def test_black_queenside(self) -> None:
        detail = castling_move("O-O-O", B)
        assert (detail.from_sq, detail.to_sq) == (E8, C8)
        assert detail.secondary == SecondaryMove(A8, D8, Piece(B, PieceType.ROOK))

    def test_white_kingside_on_board(self, castling_ready: Position) -> None:
        detail = resolve_move(castling_ready, "O-O", W)
        assert detail is not None
        assert detail.to_dict() == {
            "from": "e1",
            "to": "g1",
            "piece": "K",
            "secondaryMove": {"from": "h1", "to": "f1", "piece": "R"},
        }

    def test_annotated_castling_is_not_recognised(self, castling_ready: Position) -> None:
        assert resolve_move(castling_ready, "O-O+", W) is None


class TestPieceResolution:
    def test_pawn_push(self, start: Position) -> None:
        detail = resolve_move(start, "e4", W)
        assert detail == MoveDetail(parse_square("e2"), parse_square("e4"), Piece(W, PieceType.PAWN))

    def test_black_pawn_push(self, start: Position) -> None:
        detail = resolve_move(start, "e5", B)
        assert detail is not None
        assert detail.from_sq == parse_square("e7")

    def test_knight(self, start: Position) -> None:
        detail = resolve_move(start, "Nf3", W)
        assert detail is not None
        assert detail.from_sq == G1
        assert detail.piece == Piece(W, PieceType.KNIGHT)

    def test_annotations_stripped(self, start: Position) -> None:
        assert resolve_move(start, "Nf3+", W) == resolve_move(start, "Nf3", W)
        assert resolve_move(start, "e4!?", W) == resolve_move(start, "e4", W)

    def test_no_candidate(self, kings_only: Position) -> None:
        assert resolve_move(kings_only, "Qh5", W) is None

    def test_blocked_rook(self, start: Position) -> None:
        assert resolve_move(start, "Ra3", W) is None

    def test_own_piece_on_target(self, start: Position) -> None:
        assert resolve_move(start, "Nd2", W) is None

    def test_pawn_capture(self) -> None:
        pos = decode_board("rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR")
        detail = resolve_move(pos, "exd5", W)
        assert detail is not None
        assert detail.from_sq == parse_square("e4")
        assert detail.to_sq == parse_square("d5")

    def test_pawn_capture_on_empty_square(self, start: Position) -> None:
        assert resolve_move(start, "exd3", W) is None

    def test_piece_capture(self) -> None:
        pos = decode_board("4k3/8/8/4p3/8/5N2/8/4K3")
        detail = resolve_move(pos, "Nxe5", W)
        assert detail is not None
        assert detail.from_sq == parse_square("f3")

    def test_long_pawn_token_uses_origin(self, start: Position) -> None:
        detail = resolve_move(start, "e2e4", W)
        assert detail is not None
        assert detail.from_sq == parse_square("e2")

    @pytest.mark.parametrize("token", ["", "e8=Q", "Zz9", "xyz", "+", "Nx"])
    def test_garbage(self, start: Position, token: str) -> None:
        assert resolve_move(start, token, W) is None


class TestDisambiguation:
    def test_file(self) -> None:
        pos = decode_board("4k3/8/8/8/8/8/8/R4RK1")
        assert resolve_move(pos, "Rad1", W).from_sq == A1  # type: ignore[union-attr]
        assert resolve_move(pos, "Rfd1", W).from_sq == F1  # type: ignore[union-attr]

    def test_rank(self) -> None:
        pos = decode_board("4k3/8/8/R7/8/8/8/R3K3")
        assert resolve_move(pos, "R1a3", W).from_sq == A1  # type: ignore[union-attr]
        assert resolve_move(pos, "R5a3", W).from_sq == parse_square("a5")  # type: ignore[union-attr]

    def test_first_legal_candidate_wins(self) -> None:
        # Both rooks reach d1; the one seen first in board order is chosen.
        pos = decode_board("4k3/8/8/8/8/8/8/R4RK1")
        detail = resolve_move(pos, "Rd1", W)
        assert detail is not None
        assert detail.from_sq == A1

    def test_containment_is_loose(self) -> None:
        pos = decode_board("4k3/8/8/R7/8/8/8/R3K3")
        assert find_candidates(pos, Piece(W, PieceType.ROOK), "a") == [
            parse_square("a5"),
            A1,
        ]


class TestFrenchTokens:
    def test_french_exclusive_letter(self, start: Position) -> None:
        assert resolve_move(start, "Cf3", W) == resolve_move(start, "Nf3", W)

    def test_ambiguous_r_is_rook_by_default(self, kings_only: Position) -> None:
        assert resolve_move(kings_only, "Rf1", W) is None

    def test_ambiguous_r_is_king_in_french(self, kings_only: Position) -> None:
        detail = resolve_move(kings_only, "Rf1", W, alphabet=Alphabet.FRENCH)
        assert detail is not None
        assert detail.piece == Piece(W, PieceType.KING)
        assert detail.from_sq == E1

    def test_standard_alphabet_keeps_letters(self, start: Position) -> None:
        assert resolve_move(start, "Cf3", W, alphabet=Alphabet.STANDARD) is None

"""Tests for PositionStore: move application and failure classification."""

from __future__ import annotations

import pytest

from wechess.core.enums import Color, PieceType
from wechess.core.errors import FailureKind
from wechess.core.move import MoveRequest
from wechess.core.piece import Piece
from wechess.core.position import STARTING_FEN, PositionStore

PROMOTION_FEN = "1k6/P7/8/8/8/8/8/K7 w - - 0 1"


def _play(store: PositionStore, *moves: str) -> None:
    for uci in moves:
        assert store.apply_move(MoveRequest(uci[:2], uci[2:4])) is None, uci


class TestLifecycle:
    def test_starts_from_standard_position(self) -> None:
        store = PositionStore()
        assert store.current() == STARTING_FEN
        assert store.turn_to_move() == Color.WHITE

    def test_reset_restores_start_after_custom_fen(self) -> None:
        store = PositionStore(PROMOTION_FEN)
        assert store.reset() == STARTING_FEN
        assert store.current() == STARTING_FEN


class TestApplyMove:
    def test_legal_move_is_applied(self) -> None:
        store = PositionStore()
        assert store.apply_move(MoveRequest("e2", "e4")) is None
        assert store.piece_at("e4") == Piece(Color.WHITE, PieceType.PAWN)
        assert store.piece_at("e2") is None
        assert store.turn_to_move() == Color.BLACK

    def test_promotion_piece_ignored_for_ordinary_move(self) -> None:
        store = PositionStore()
        assert store.apply_move(MoveRequest("e2", "e4", PieceType.QUEEN)) is None
        assert store.piece_at("e4") == Piece(Color.WHITE, PieceType.PAWN)

    def test_promotion_defaults_to_queen(self) -> None:
        store = PositionStore(PROMOTION_FEN)
        assert store.apply_move(MoveRequest("a7", "a8")) is None
        assert store.piece_at("a8") == Piece(Color.WHITE, PieceType.QUEEN)

    def test_promotion_uses_requested_piece(self) -> None:
        store = PositionStore(PROMOTION_FEN)
        assert store.apply_move(MoveRequest("a7", "a8", PieceType.KNIGHT)) is None
        assert store.piece_at("a8") == Piece(Color.WHITE, PieceType.KNIGHT)


class TestClassification:
    @pytest.mark.parametrize(
        ("request_", "kind", "message"),
        [
            (
                MoveRequest("d1", "d2"),
                FailureKind.OWN_PIECE_AT_DESTINATION,
                "Cannot capture your own piece on D2",
            ),
            (MoveRequest("e4", "e5"), FailureKind.NO_PIECE_AT_SOURCE, "No piece on E4"),
            (MoveRequest("e7", "e5"), FailureKind.WRONG_TURN, "It's White's turn"),
            (
                MoveRequest("g1", "g3"),
                FailureKind.ILLEGAL_DESTINATION,
                "Knight cannot move to G3",
            ),
            (
                MoveRequest("z9", "e4"),
                FailureKind.MALFORMED_REQUEST,
                "Invalid move format: Z9 to E4",
            ),
        ],
    )
    def test_rejected_moves_are_classified(
        self, request_: MoveRequest, kind: FailureKind, message: str
    ) -> None:
        store = PositionStore()
        before = store.current()
        failure = store.apply_move(request_)
        assert failure is not None
        assert failure.kind == kind
        assert failure.message == message
        assert store.current() == before

    def test_promotion_to_king_is_malformed(self) -> None:
        store = PositionStore(PROMOTION_FEN)
        failure = store.apply_move(MoveRequest("a7", "a8", PieceType.KING))
        assert failure is not None
        assert failure.kind == FailureKind.MALFORMED_REQUEST
        assert failure.message == "Cannot promote to king"
        assert store.current() == PROMOTION_FEN

    def test_pinned_piece_cannot_leave_the_pin(self) -> None:
        # Black bishop b4 pins the d2 pawn against the e1 king.
        store = PositionStore("4k3/8/8/8/1b6/8/3P4/4K3 w - - 0 1")
        failure = store.apply_move(MoveRequest("d2", "d3"))
        assert failure is not None
        assert failure.kind == FailureKind.ILLEGAL_DESTINATION
        assert failure.message == "Pawn cannot move to D3"


class TestQueries:
    def test_piece_at_invalid_name_is_none(self) -> None:
        store = PositionStore()
        assert store.piece_at("x0") is None
        assert store.piece_at("e9") is None

    def test_legal_destinations(self) -> None:
        store = PositionStore()
        assert store.legal_destinations("e2") == {"e3", "e4"}
        assert store.legal_destinations("g1") == {"f3", "h3"}
        assert store.legal_destinations("e4") == set()
        assert store.legal_destinations("bogus") == set()

    def test_pieces_lists_all_thirty_two(self) -> None:
        store = PositionStore()
        pieces = dict(store.pieces())
        assert len(pieces) == 32
        assert pieces["e1"] == Piece(Color.WHITE, PieceType.KING)
        assert pieces["d8"] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_king_square(self) -> None:
        store = PositionStore()
        assert store.king_square(Color.WHITE) == "e1"
        assert store.king_square(Color.BLACK) == "e8"

    def test_is_promotion(self) -> None:
        store = PositionStore(PROMOTION_FEN)
        assert store.is_promotion("a7", "a8")
        assert not store.is_promotion("a1", "a2")
        assert not PositionStore().is_promotion("e2", "e4")

    def test_black_promotion_rank(self) -> None:
        store = PositionStore("k7/8/8/8/8/8/6p1/K7 b - - 0 1")
        assert store.is_promotion("g2", "g1")
        assert not store.is_promotion("g2", "g8")


class TestGameEnd:
    def test_fools_mate_is_checkmate(self) -> None:
        store = PositionStore()
        _play(store, "f2f3", "e7e5", "g2g4", "d8h4")
        assert store.is_in_check()
        assert store.is_checkmate()
        assert store.is_game_over()
        assert not store.is_draw()

    def test_stalemate_is_draw(self) -> None:
        store = PositionStore("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert not store.is_in_check()
        assert store.is_draw()
        assert store.is_game_over()

    def test_insufficient_material_is_draw(self) -> None:
        store = PositionStore("8/8/8/4k3/8/8/8/4K3 w - - 0 1")
        assert store.is_draw()

    def test_threefold_repetition_is_draw(self) -> None:
        store = PositionStore()
        _play(store, "g1f3", "g8f6", "f3g1", "f6g8", "g1f3", "g8f6", "f3g1", "f6g8")
        assert store.is_draw()

"""Tests for InputMediator click, drag and drop semantics."""

from __future__ import annotations

from wechess.core.errors import FailureKind
from wechess.core.position import STARTING_FEN, PositionStore
from wechess.game.input import InputMediator
from wechess.game.resolver import MoveResolver


def _mediator(fen: str | None = None) -> tuple[PositionStore, InputMediator]:
    store = PositionStore(fen)
    return store, InputMediator(store, MoveResolver(store))


class TestClicks:
    def test_click_own_piece_selects(self) -> None:
        _store, mediator = _mediator()
        assert mediator.on_square_click("e2") is None
        assert mediator.selected == "e2"

    def test_click_selected_square_deselects(self) -> None:
        _store, mediator = _mediator()
        mediator.on_square_click("e2")
        assert mediator.on_square_click("e2") is None
        assert mediator.selected is None

    def test_click_other_own_piece_reselects(self) -> None:
        store, mediator = _mediator()
        mediator.on_square_click("e2")
        assert mediator.on_square_click("g1") is None
        assert mediator.selected == "g1"
        assert store.current() == STARTING_FEN

    def test_click_empty_square_without_selection(self) -> None:
        _store, mediator = _mediator()
        assert mediator.on_square_click("e4") is None
        assert mediator.selected is None

    def test_click_opponent_piece_without_selection(self) -> None:
        _store, mediator = _mediator()
        result = mediator.on_square_click("e7")
        assert result is not None
        assert result.failure is not None
        assert result.failure.kind == FailureKind.WRONG_TURN
        assert result.failure.message == "It's White's turn"
        assert mediator.selected is None

    def test_two_clicks_make_a_move(self) -> None:
        store, mediator = _mediator()
        mediator.on_square_click("e2")
        result = mediator.on_square_click("e4")
        assert result is not None and result.applied
        assert mediator.selected is None
        assert store.piece_at("e4") is not None

    def test_illegal_destination_clears_selection(self) -> None:
        store, mediator = _mediator()
        mediator.on_square_click("e2")
        result = mediator.on_square_click("e5")
        assert result is not None
        assert result.failure is not None
        assert result.failure.message == "Pawn cannot move to E5"
        assert mediator.selected is None
        assert store.current() == STARTING_FEN

    def test_click_to_promotion_square_parks_move(self) -> None:
        _store, mediator = _mediator("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        mediator.on_square_click("a7")
        result = mediator.on_square_click("a8")
        assert result is not None and result.pending
        assert mediator.selected is None


class TestDrag:
    def test_drag_begin_own_piece(self) -> None:
        _store, mediator = _mediator()
        assert mediator.on_drag_begin("b1")
        assert mediator.selected == "b1"

    def test_drag_begin_opponent_piece_vetoed(self) -> None:
        _store, mediator = _mediator()
        mediator.on_square_click("e2")
        assert not mediator.on_drag_begin("e7")
        assert mediator.selected == "e2"

    def test_drag_begin_empty_square_allowed(self) -> None:
        _store, mediator = _mediator()
        assert mediator.on_drag_begin("e4")
        assert mediator.selected == "e4"

    def test_drop_applies_move(self) -> None:
        store, mediator = _mediator()
        mediator.on_drag_begin("g1")
        result = mediator.on_drop("g1", "f3")
        assert result is not None and result.applied
        assert mediator.selected is None
        assert store.piece_at("f3") is not None

    def test_drop_off_board_is_ignored(self) -> None:
        store, mediator = _mediator()
        mediator.on_drag_begin("g1")
        assert mediator.on_drop("g1", None) is None
        assert mediator.selected == "g1"
        assert store.current() == STARTING_FEN

    def test_drop_on_source_square_is_ignored(self) -> None:
        store, mediator = _mediator()
        mediator.on_drag_begin("e2")
        assert mediator.on_drop("e2", "e2") is None
        assert mediator.selected == "e2"
        assert store.current() == STARTING_FEN

    def test_drop_from_empty_square(self) -> None:
        _store, mediator = _mediator()
        result = mediator.on_drop("e4", "e5")
        assert result is not None
        assert result.failure is not None
        assert result.failure.kind == FailureKind.NO_PIECE_AT_SOURCE
        assert result.failure.message == "No piece on E4"

    def test_drop_opponent_piece(self) -> None:
        _store, mediator = _mediator()
        result = mediator.on_drop("e7", "e5")
        assert result is not None
        assert result.failure is not None
        assert result.failure.kind == FailureKind.WRONG_TURN

    def test_drop_malformed_square(self) -> None:
        _store, mediator = _mediator()
        result = mediator.on_drop("e2", "k9")
        assert result is not None
        assert result.failure is not None
        assert result.failure.kind == FailureKind.MALFORMED_REQUEST

"""Tests for BoardScene rendering helpers and gesture dispatch."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from wechess.game.commands import Command, DragBegin
from wechess.game.session import CommandResult, GameSession
from wechess.game.view import HighlightTag
from wechess.ui.board.board_scene import BoardScene


def _wired_scene(session: GameSession) -> tuple[BoardScene, list[Command]]:
    """Scene whose dispatcher forwards to *session* and redraws, like MainWindow."""
    scene = BoardScene()
    issued: list[Command] = []

    def dispatch(command: Command) -> CommandResult:
        issued.append(command)
        result = session.dispatch(command)
        scene.show_session(session)
        return result

    scene.set_dispatcher(dispatch)
    scene.show_session(session)
    return scene, issued


def _press(scene: BoardScene, square: str) -> None:
    scene._press_sq = square
    scene._press_pos = scene._square_origin(square) + QPointF(40, 40)


def test_pos_to_square_respects_orientation(qapp: object) -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "a8"

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "h1"


def test_pos_to_square_off_board_is_none(qapp: object) -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(-1, 10)) is None
    assert scene._pos_to_square(QPointF(8 * BoardScene.TILE + 5, 10)) is None


def test_set_show_coordinates_toggles_all_labels_visibility(qapp: object) -> None:
    scene = BoardScene()
    assert scene._coord_items

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_show_session_draws_all_pieces(qapp: object) -> None:
    scene = BoardScene()
    scene.show_session(GameSession())
    assert len(scene._piece_items) == 32
    assert scene._piece_items["e1"].piece.piece_type.name == "KING"


def test_hidden_legal_moves_keep_selection_highlight(qapp: object) -> None:
    scene = BoardScene()
    scene.set_highlights(
        {
            "e2": HighlightTag.SELECTED,
            "e3": HighlightTag.LEGAL_DESTINATION,
            "e4": HighlightTag.LEGAL_DESTINATION,
        }
    )
    assert len(scene._highlight_items) == 3

    scene.set_show_legal_moves(False)
    assert len(scene._highlight_items) == 1


def test_check_marker_follows_session(qapp: object) -> None:
    session = GameSession()
    for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
        session.drop(uci[:2], uci[2:4])
    scene = BoardScene()
    scene.show_session(session)
    assert len(scene._check_items) == 1

    scene.show_session(GameSession())
    assert scene._check_items == []


def test_drag_and_drop_moves_piece(qapp: object) -> None:
    session = GameSession()
    scene, issued = _wired_scene(session)

    _press(scene, "e2")
    scene._begin_drag("e2")
    assert scene._dragging_item is not None
    assert scene._dragging_item.is_dragging
    assert session.selected_square == "e2"

    scene._finish_drop("e4")
    assert scene._dragging_item is None
    assert session.piece_at("e4") is not None
    assert "e4" in scene._piece_items
    assert "e2" not in scene._piece_items
    assert isinstance(issued[0], DragBegin)


def test_drag_of_opponent_piece_is_vetoed(qapp: object) -> None:
    session = GameSession()
    scene, _issued = _wired_scene(session)

    _press(scene, "e7")
    scene._begin_drag("e7")
    assert scene._dragging_item is None
    assert scene._press_sq is None


def test_rejected_drop_snaps_piece_back(qapp: object) -> None:
    session = GameSession()
    scene = BoardScene()
    scene.show_session(session)
    scene.set_dispatcher(lambda _command: CommandResult(ok=True))

    _press(scene, "e2")
    scene._begin_drag("e2")
    item = scene._dragging_item
    assert item is not None
    origin = item.pos()
    item.setPos(origin + QPointF(80, -160))

    scene.set_dispatcher(lambda _command: CommandResult(ok=False))
    scene._finish_drop("e5")
    assert item.pos() == origin
    assert not item.is_dragging


def test_without_dispatcher_nothing_happens(qapp: object) -> None:
    scene = BoardScene()
    scene.show_session(GameSession())
    _press(scene, "e2")
    scene._begin_drag("e2")
    assert scene._dragging_item is None


def test_non_interactive_cancels_gesture(qapp: object) -> None:
    session = GameSession()
    scene, _issued = _wired_scene(session)
    _press(scene, "e2")
    scene._begin_drag("e2")

    scene.set_interactive(False)
    assert not scene.is_interactive()
    assert scene._dragging_item is None
    assert scene._press_sq is None

"""Input mediator — click and drag gestures to move requests.

Owns the selected square.  Clicks follow the usual two-click pattern:
pick a piece of the side to move, then pick a destination.  Drags carry
both squares at once.
"""

from __future__ import annotations

from wechess.core.errors import FailureKind, MoveFailure
from wechess.core.move import MoveRequest
from wechess.core.position import PositionStore
from wechess.core.types import Square, is_square_name
from wechess.game.resolver import MoveResolver, MoveResult


class InputMediator:
    __slots__ = ("_store", "_resolver", "_selected")

    def __init__(self, store: PositionStore, resolver: MoveResolver) -> None:
        self._store = store
        self._resolver = resolver
        self._selected: Square | None = None

    @property
    def selected(self) -> Square | None:
        return self._selected

    def clear_selection(self) -> None:
        self._selected = None

    # ── Gestures ─────────────────────────────────────────────────────────

    def on_drop(self, source: Square, target: Square | None) -> MoveResult | None:
        """A piece dragged from *source* was released on *target*.

        ``target`` is ``None`` when the piece was dropped off the board.
        That, or a drop back onto *source*, cancels the drag and returns
        ``None`` with the selection kept.
        """
        if target is None or target == source:
            return None

        if is_square_name(source) and is_square_name(target):
            failure = self._turn_failure(source)
            if failure is not None:
                self._selected = None
                return MoveResult.rejected(self._store.current(), failure)

        result = self._resolver.submit(MoveRequest(source, target))
        self._selected = None
        return result

    def on_square_click(self, square: Square) -> MoveResult | None:
        """Handle a click.  Returns a result only when a move was attempted
        or the click was refused."""
        piece = self._store.piece_at(square)
        turn = self._store.turn_to_move()

        if self._selected is None:
            if piece is None:
                return None
            if piece.color == turn:
                self._selected = square
                return None
            return MoveResult.rejected(
                self._store.current(),
                MoveFailure(FailureKind.WRONG_TURN, f"It's {turn.display}'s turn"),
            )

        if square == self._selected:
            self._selected = None
            return None

        if piece is not None and piece.color == turn:
            self._selected = square
            return None

        result = self._resolver.submit(MoveRequest(self._selected, square))
        self._selected = None
        return result

    def on_drag_begin(self, square: Square) -> bool:
        """Whether a drag may start on *square*.

        Opponent pieces are vetoed.  Otherwise the square becomes the
        selection so its legal destinations light up during the drag.
        """
        piece = self._store.piece_at(square)
        if piece is not None and piece.color != self._store.turn_to_move():
            return False
        self._selected = square
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _turn_failure(self, source: Square) -> MoveFailure | None:
        piece = self._store.piece_at(source)
        if piece is None:
            return MoveFailure(
                FailureKind.NO_PIECE_AT_SOURCE, f"No piece on {source.upper()}"
            )
        turn = self._store.turn_to_move()
        if piece.color != turn:
            return MoveFailure(FailureKind.WRONG_TURN, f"It's {turn.display}'s turn")
        return None

"""GameSession — one self-contained two-player game.

Owns the position, the selection, the parked promotion and the clock,
and routes every command through :meth:`GameSession.dispatch`.  Derived
view state (captured pieces, status, highlights) is rebuilt before any
listener is notified, so observers never see a half-updated game.

Thread-safety: none needed as long as every command is dispatched from
one thread (the Qt main thread in the application).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from wechess.core.enums import Color, PieceType
from wechess.core.errors import FailureKind, MoveFailure
from wechess.core.move import PendingPromotion
from wechess.core.piece import Piece
from wechess.core.position import PositionStore
from wechess.core.types import Square
from wechess.game.clock import Clock, ClockState
from wechess.game.commands import (
    CancelPromotion,
    Click,
    Command,
    DragBegin,
    Drop,
    Reset,
    ResolvePromotion,
    SetClockBudget,
    Tick,
)
from wechess.game.input import InputMediator
from wechess.game.interfaces import GamePhase, TimeControl
from wechess.game.resolver import MoveResolver, MoveResult
from wechess.game.view import (
    CapturedPieces,
    GameStatus,
    HighlightTag,
    derive_captured_pieces,
    derive_highlights,
    derive_status,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

ChangedCallback = Callable[["GameSession"], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_changed: list[ChangedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """What a dispatched command did.

    ``ok`` means: the move was applied (Drop, ResolvePromotion), the click
    was not refused (Click), the drag may start (DragBegin), a promotion
    was discarded (CancelPromotion), the clock ticked (Tick); always true
    for Reset and SetClockBudget.
    """

    ok: bool
    move: MoveResult | None = None


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    __slots__ = (
        "_store",
        "_resolver",
        "_input",
        "_clock",
        "_last_error",
        "_captured",
        "_status",
        "_highlights",
        "_moves_played",
        "_flagged",
        "events",
    )

    def __init__(
        self,
        minutes_per_side: int = TimeControl.DEFAULT_MINUTES,
        fen: str | None = None,
    ) -> None:
        self._store = PositionStore(fen)
        self._resolver = MoveResolver(self._store)
        self._input = InputMediator(self._store, self._resolver)
        self._clock = Clock(TimeControl(minutes_per_side))
        self._last_error = ""
        self._moves_played = 0
        self._flagged: Color | None = None
        self.events = SessionEvents()
        self._refresh()

    # ── Snapshot properties ──────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return self._store.current()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def captured(self) -> CapturedPieces:
        return self._captured

    @property
    def highlights(self) -> dict[Square, HighlightTag]:
        return dict(self._highlights)

    @property
    def clock(self) -> ClockState:
        return self._clock.snapshot()

    @property
    def time_control(self) -> TimeControl:
        return self._clock.time_control

    @property
    def pending_promotion(self) -> PendingPromotion | None:
        return self._resolver.pending

    @property
    def last_error(self) -> str:
        return self._last_error

    @property
    def selected_square(self) -> Square | None:
        return self._input.selected

    @property
    def turn(self) -> Color:
        return self._store.turn_to_move()

    @property
    def phase(self) -> GamePhase:
        if self._status.is_game_over:
            return GamePhase.GAME_OVER
        if self._resolver.pending is not None:
            return GamePhase.AWAITING_PROMOTION
        if self._moves_played == 0:
            return GamePhase.NOT_STARTED
        return GamePhase.AWAITING_MOVE

    def piece_at(self, square: Square) -> Piece | None:
        return self._store.piece_at(square)

    def pieces(self) -> dict[Square, Piece]:
        return dict(self._store.pieces())

    def king_in_check(self) -> Square | None:
        """Square of the side-to-move's king when it is in check."""
        if not self._status.in_check:
            return None
        return self._store.king_square(self._status.turn_color)

    # ── Dispatch ─────────────────────────────────────────────────────────

    def dispatch(self, command: Command) -> CommandResult:
        """Run one command to completion, then notify listeners."""
        was_over = self._status.is_game_over

        if isinstance(command, Drop):
            result = self._on_drop(command)
        elif isinstance(command, Click):
            result = self._on_click(command)
        elif isinstance(command, DragBegin):
            result = self._on_drag_begin(command)
        elif isinstance(command, ResolvePromotion):
            result = self._on_resolve_promotion(command)
        elif isinstance(command, CancelPromotion):
            result = CommandResult(ok=self._resolver.cancel_promotion())
        elif isinstance(command, Reset):
            result = self._on_reset()
        elif isinstance(command, Tick):
            result = self._on_tick()
        elif isinstance(command, SetClockBudget):
            result = self._on_set_budget(command)
        else:
            raise TypeError(f"Unknown command: {command!r}")

        self._refresh()
        if self._status.is_game_over and not was_over:
            self._on_game_ended()
        self._emit_changed()
        return result

    # Convenience wrappers, one per command

    def drop(self, source: Square, target: Square | None) -> CommandResult:
        return self.dispatch(Drop(source, target))

    def click(self, square: Square) -> CommandResult:
        return self.dispatch(Click(square))

    def drag_begin(self, square: Square) -> CommandResult:
        return self.dispatch(DragBegin(square))

    def resolve_promotion(self, piece_type: PieceType) -> CommandResult:
        return self.dispatch(ResolvePromotion(piece_type))

    def cancel_promotion(self) -> CommandResult:
        return self.dispatch(CancelPromotion())

    def reset(self) -> CommandResult:
        return self.dispatch(Reset())

    def tick(self) -> CommandResult:
        return self.dispatch(Tick())

    def set_clock_budget(self, minutes: int) -> CommandResult:
        return self.dispatch(SetClockBudget(minutes))

    # ── Command handlers ─────────────────────────────────────────────────

    def _on_drop(self, command: Drop) -> CommandResult:
        if command.target is not None and self._status.is_game_over:
            return self._refuse_game_over()
        # Off-board and same-square drops come back as None.
        move = self._input.on_drop(command.source, command.target)
        return self._record(move)

    def _on_click(self, command: Click) -> CommandResult:
        if self._status.is_game_over:
            return self._refuse_game_over()
        if self._resolver.pending is not None:
            return self._refuse(
                FailureKind.PROMOTION_PENDING, "Choose a promotion piece first"
            )
        move = self._input.on_square_click(command.square)
        if move is None:
            return CommandResult(ok=True)
        self._record(move)
        return CommandResult(ok=move.failure is None, move=move)

    def _on_drag_begin(self, command: DragBegin) -> CommandResult:
        if self._status.is_game_over or self._resolver.pending is not None:
            return CommandResult(ok=False)
        return CommandResult(ok=self._input.on_drag_begin(command.square))

    def _on_resolve_promotion(self, command: ResolvePromotion) -> CommandResult:
        if self._resolver.pending is None:
            return CommandResult(ok=False)
        if self._status.is_game_over:
            self._resolver.cancel_promotion()
            return self._refuse_game_over()
        move = self._resolver.resolve_promotion(command.piece_type)
        if move is not None and move.applied:
            self._input.clear_selection()
        return self._record(move)

    def _on_reset(self) -> CommandResult:
        self._store.reset()
        self._resolver.reset()
        self._input.clear_selection()
        self._clock.reset()
        self._last_error = ""
        self._moves_played = 0
        self._flagged = None
        _LOGGER.info("Game reset (%s per side)", self._clock.time_control)
        return CommandResult(ok=True)

    def _on_tick(self) -> CommandResult:
        if not self._clock.is_running or self._status.is_game_over:
            return CommandResult(ok=False)
        color = self._store.turn_to_move()
        if self._clock.tick(color):
            self._flagged = color
            _LOGGER.info("%s ran out of time", color.display)
            self._resolver.cancel_promotion()
            self._input.clear_selection()
        return CommandResult(ok=True)

    def _on_set_budget(self, command: SetClockBudget) -> CommandResult:
        self._clock.set_budget(command.minutes)
        _LOGGER.info("Clock budget set to %s per side", self._clock.time_control)
        return CommandResult(ok=True)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _record(self, move: MoveResult | None) -> CommandResult:
        """Update the error line and clock for one move attempt."""
        if move is None:
            return CommandResult(ok=False)
        self._last_error = move.failure.message if move.failure is not None else ""
        if move.applied:
            self._moves_played += 1
            self._clock.on_move_applied()
            _LOGGER.info("Move applied, position now %s", move.fen)
        return CommandResult(ok=move.applied, move=move)

    def _refuse_game_over(self) -> CommandResult:
        return self._refuse(FailureKind.GAME_OVER, "The game is over")

    def _refuse(self, kind: FailureKind, message: str) -> CommandResult:
        move = MoveResult.rejected(self._store.current(), MoveFailure(kind, message))
        return self._record(move)

    def _refresh(self) -> None:
        self._captured = derive_captured_pieces(self._store)
        self._status = derive_status(self._store, self._flagged)
        self._highlights = derive_highlights(self._store, self._input.selected)

    def _on_game_ended(self) -> None:
        self._clock.stop()
        _LOGGER.info("Game over: %s", self._status.status_text)
        for cb in self.events.on_game_over:
            cb(self._status)

    def _emit_changed(self) -> None:
        for cb in self.events.on_changed:
            cb(self)

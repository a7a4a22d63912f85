"""Game management layer — session, resolver, input, clock, view state.

Quick start::

    from wechess.game import Click, GameSession

    session = GameSession(minutes_per_side=5)
    session.dispatch(Click("e2"))
    session.dispatch(Click("e4"))
    print(session.status.status_text)   # "Black to move"
"""

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
from wechess.game.resolver import MoveResolver, MoveResult, MoveStatus, ResolverState
from wechess.game.session import CommandResult, GameSession, SessionEvents
from wechess.game.view import (
    PIECE_VALUES,
    CapturedPieces,
    GameStatus,
    HighlightTag,
    captured_points,
    derive_captured_pieces,
    derive_highlights,
    derive_status,
    format_clock,
)

__all__ = [
    # Commands
    "CancelPromotion",
    "Click",
    "Command",
    "DragBegin",
    "Drop",
    "Reset",
    "ResolvePromotion",
    "SetClockBudget",
    "Tick",
    # Session
    "CommandResult",
    "GamePhase",
    "GameSession",
    "SessionEvents",
    "TimeControl",
    # Components
    "Clock",
    "ClockState",
    "InputMediator",
    "MoveResolver",
    "MoveResult",
    "MoveStatus",
    "ResolverState",
    # View state
    "PIECE_VALUES",
    "CapturedPieces",
    "GameStatus",
    "HighlightTag",
    "captured_points",
    "derive_captured_pieces",
    "derive_highlights",
    "derive_status",
    "format_clock",
]

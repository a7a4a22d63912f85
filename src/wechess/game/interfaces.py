"""Shared game-layer definitions: session phases and time control."""

from __future__ import annotations

from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Coarse session state, used by the UI to gate board interaction."""

    NOT_STARTED = auto()  # no move played yet
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


# ── Time control presets ─────────────────────────────────────────────────────


class TimeControl:
    """Immutable per-side time budget, in whole minutes.

    Args:
        minutes_per_side: Starting time for each player.
    """

    __slots__ = ("minutes_per_side",)

    # Budgets offered by the timer menu
    OPTIONS: tuple[int, ...] = (5, 10, 15, 20, 25, 30)
    DEFAULT_MINUTES = 10

    def __init__(self, minutes_per_side: int = DEFAULT_MINUTES) -> None:
        if isinstance(minutes_per_side, bool) or not isinstance(minutes_per_side, int):
            raise TypeError(f"minutes_per_side must be an int, got {minutes_per_side!r}")
        if minutes_per_side <= 0:
            raise ValueError(f"minutes_per_side must be positive, got {minutes_per_side}")
        self.minutes_per_side = minutes_per_side

    @property
    def seconds_per_side(self) -> int:
        return self.minutes_per_side * 60

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.minutes_per_side == other.minutes_per_side

    def __hash__(self) -> int:
        return hash(self.minutes_per_side)

    def __repr__(self) -> str:
        return f"TimeControl({self.minutes_per_side}m)"

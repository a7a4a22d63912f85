"""Dual countdown clock driven by explicit one-second ticks."""

from __future__ import annotations

from dataclasses import dataclass

from wechess.core.enums import Color
from wechess.game.interfaces import TimeControl


@dataclass(frozen=True, slots=True)
class ClockState:
    """Read-only view of the clock for the presentation layer."""

    per_side_budget_seconds: int
    white_remaining: int
    black_remaining: int
    running: bool

    def remaining(self, color: Color) -> int:
        return self.white_remaining if color == Color.WHITE else self.black_remaining


class Clock:
    """Chess clock tracking remaining whole seconds for both players.

    The clock never reads wall time.  Somebody else calls :meth:`tick` once
    per second with the colour to debit, so tests can simulate time freely.
    """

    __slots__ = ("_time_control", "_remaining", "_running")

    def __init__(self, time_control: TimeControl | None = None) -> None:
        self._time_control = time_control or TimeControl()
        self._remaining: dict[Color, int] = {}
        self._running = False
        self.reset()

    # ── Control ──────────────────────────────────────────────────────────

    def set_budget(self, minutes_per_side: int) -> None:
        """Install a new per-side budget, refill both sides and stop."""
        self._time_control = TimeControl(minutes_per_side)
        self.reset()

    def reset(self) -> None:
        """Refill both sides with the configured budget and stop."""
        budget = self._time_control.seconds_per_side
        self._remaining = {Color.WHITE: budget, Color.BLACK: budget}
        self._running = False

    def on_move_applied(self) -> None:
        """Start counting on the first move of the game."""
        if not self._running and self.flagged is None:
            self._running = True

    def stop(self) -> None:
        self._running = False

    def tick(self, color: Color) -> bool:
        """Debit one second from *color*.

        Returns ``True`` if this tick made *color*'s flag fall.
        """
        if not self._running:
            return False
        self._remaining[color] = max(0, self._remaining[color] - 1)
        if self._remaining[color] == 0:
            self._running = False
            return True
        return False

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def is_running(self) -> bool:
        return self._running

    def remaining(self, color: Color) -> int:
        return self._remaining[color]

    def is_flag_fallen(self, color: Color) -> bool:
        return self._remaining[color] <= 0

    @property
    def flagged(self) -> Color | None:
        """The side whose time ran out, if any."""
        for color in (Color.WHITE, Color.BLACK):
            if self.is_flag_fallen(color):
                return color
        return None

    def snapshot(self) -> ClockState:
        return ClockState(
            per_side_budget_seconds=self._time_control.seconds_per_side,
            white_remaining=self._remaining[Color.WHITE],
            black_remaining=self._remaining[Color.BLACK],
            running=self._running,
        )

"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

from wechess.game.interfaces import TimeControl


@dataclass
class AppSettings:
    """All user-configurable settings.  Not persisted between runs."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Clock
    timer_minutes: int = TimeControl.DEFAULT_MINUTES

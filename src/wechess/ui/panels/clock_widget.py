"""ClockWidget — dual chess clock banner."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from wechess.core.enums import Color
from wechess.game.clock import ClockState
from wechess.game.view import format_clock
from wechess.ui.i18n import t

_LOW_TIME_SECONDS = 30


class _SingleClock(QLabel):
    """Display for one player's time."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = color
        self._active = False
        self._is_low_time = False

        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont(self.font().family(), 22, QFont.Weight.Bold))
        self.setMinimumWidth(110)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        self.setText(format_clock(0))
        self._apply_style()

    def set_active(self, active: bool) -> None:
        self._active = active
        self._apply_style()

    def _apply_style(self) -> None:
        if not self._active:
            self.setStyleSheet(
                "background-color: #2b2b2b; color: #aaa; "
                "padding: 6px 12px; border-radius: 4px;"
            )
            return

        if self._is_low_time:
            self.setStyleSheet(
                "background-color: #8b2020; color: white; "
                "padding: 6px 12px; border-radius: 4px;"
            )
            return

        self.setStyleSheet(
            "background-color: #3a7d44; color: white; "
            "padding: 6px 12px; border-radius: 4px;"
        )

    def update_time(self, seconds: int) -> None:
        self.setText(format_clock(seconds))
        self._is_low_time = seconds < _LOW_TIME_SECONDS
        self._apply_style()


class ClockWidget(QWidget):
    """Both clocks with a turn indicator between them."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._white_clock = _SingleClock(Color.WHITE)
        self._black_clock = _SingleClock(Color.BLACK)
        self._turn: Color = Color.WHITE

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        w_box = QVBoxLayout()
        self._w_label = QLabel()
        self._w_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        w_box.addWidget(self._w_label)
        w_box.addWidget(self._white_clock)

        self._turn_label = QLabel()
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        b_box = QVBoxLayout()
        self._b_label = QLabel()
        self._b_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        b_box.addWidget(self._b_label)
        b_box.addWidget(self._black_clock)

        layout.addLayout(w_box)
        layout.addWidget(self._turn_label)
        layout.addLayout(b_box)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._w_label.setText(s.clock_white)
        self._b_label.setText(s.clock_black)
        self._update_turn_label()

    def update_state(self, state: ClockState, turn: Color) -> None:
        """Show *state*; the side to move is highlighted while running."""
        self._turn = turn
        self._white_clock.update_time(state.white_remaining)
        self._black_clock.update_time(state.black_remaining)
        self._white_clock.set_active(state.running and turn == Color.WHITE)
        self._black_clock.set_active(state.running and turn == Color.BLACK)
        self._update_turn_label()

    def _update_turn_label(self) -> None:
        s = t()
        color = s.clock_white if self._turn == Color.WHITE else s.clock_black
        self._turn_label.setText(s.turn_to_move.format(color=color))

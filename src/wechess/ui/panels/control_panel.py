"""ControlPanel — reset, flip and timer-budget controls."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from wechess.game.interfaces import TimeControl
from wechess.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions and the per-side timer budget."""

    reset_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()
    budget_changed = pyqtSignal(int)  # minutes per side

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._btn_reset = QPushButton()
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

        self._btn_flip = QPushButton()
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        layout.addWidget(self._btn_flip)

        self._timer_label = QLabel()
        layout.addWidget(self._timer_label)

        self._timer_combo = QComboBox()
        for minutes in TimeControl.OPTIONS:
            self._timer_combo.addItem("", minutes)
        self._timer_combo.activated.connect(self._on_timer_activated)
        layout.addWidget(self._timer_combo)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_reset.setText(s.btn_reset)
        self._btn_flip.setText(s.btn_flip)
        self._timer_label.setText(s.timer_label)
        for index in range(self._timer_combo.count()):
            minutes = self._timer_combo.itemData(index)
            self._timer_combo.setItemText(index, s.minutes_option.format(minutes=minutes))

    def set_minutes(self, minutes: int) -> None:
        """Reflect the active budget without emitting ``budget_changed``."""
        index = self._timer_combo.findData(minutes)
        if index >= 0:
            self._timer_combo.setCurrentIndex(index)

    def minutes(self) -> int:
        return int(self._timer_combo.currentData())

    def _on_timer_activated(self, index: int) -> None:
        self.budget_changed.emit(int(self._timer_combo.itemData(index)))

"""CapturedPanel — one side's captured pieces and material score."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from wechess.core.enums import Color, PieceType
from wechess.core.piece import piece_symbol
from wechess.game.view import captured_points
from wechess.ui.i18n import t


class CapturedPanel(QWidget):
    """Shows the pieces *color* has captured, e.g. ``White: +4 ♟♞``."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = color
        self._pieces: tuple[PieceType, ...] = ()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        self._label = QLabel()
        self._symbols = QLabel()
        layout.addWidget(self._label)
        layout.addWidget(self._symbols, stretch=1)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        self._render()

    def set_pieces(self, pieces: Sequence[PieceType]) -> None:
        self._pieces = tuple(pieces)
        self._render()

    @property
    def points(self) -> int:
        return captured_points(self._pieces)

    def symbols_text(self) -> str:
        return self._symbols.text()

    def label_text(self) -> str:
        return self._label.text()

    def _render(self) -> None:
        s = t()
        name = s.captured_white if self._color == Color.WHITE else s.captured_black
        self._label.setText(f"{name}: +{self.points}")
        # Captured pieces belong to the other side.
        victim = self._color.opposite
        self._symbols.setText("".join(piece_symbol(victim, p) for p in self._pieces))

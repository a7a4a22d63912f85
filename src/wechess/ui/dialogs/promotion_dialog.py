"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QGridLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from wechess.core.enums import PROMOTION_PIECES, Color, PieceType
from wechess.core.piece import piece_symbol
from wechess.ui.i18n import t


def _piece_label(piece_type: PieceType) -> str:
    s = t()
    return {
        PieceType.QUEEN: s.piece_queen,
        PieceType.ROOK: s.piece_rook,
        PieceType.BISHOP: s.piece_bishop,
        PieceType.KNIGHT: s.piece_knight,
    }[piece_type]


class PromotionDialog(QDialog):
    """Modal dialog to select promotion piece type.

    Rejecting the dialog (Cancel, Escape, closing the window) means the
    pawn move is abandoned.
    """

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(320)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._selected: PieceType = PieceType.QUEEN
        self._buttons: dict[PieceType, QPushButton] = {}

        layout = QVBoxLayout(self)
        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setFont(QFont(self._label.font().family(), 13, QFont.Weight.DemiBold))
        layout.addWidget(self._label)

        grid = QGridLayout()
        glyph_font = QFont()
        glyph_font.setPixelSize(40)
        for index, pt in enumerate(PROMOTION_PIECES):
            btn = QPushButton(piece_symbol(color, pt))
            btn.setFont(glyph_font)
            btn.setMinimumSize(100, 90)
            btn.clicked.connect(lambda checked, p=pt: self._choose(p))
            grid.addWidget(btn, index // 2, index % 2)
            self._buttons[pt] = btn
        layout.addLayout(grid)

        self._cancel = QPushButton()
        self._cancel.clicked.connect(self.reject)
        layout.addWidget(self._cancel)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.promote_title)
        self._label.setText(s.promote_label)
        self._cancel.setText(s.promote_cancel)
        for pt, btn in self._buttons.items():
            btn.setToolTip(_piece_label(pt))

    def _choose(self, piece_type: PieceType) -> None:
        self._selected = piece_type
        self.accept()

    @property
    def selected(self) -> PieceType:
        return self._selected

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Show the dialog and return the chosen piece type, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None

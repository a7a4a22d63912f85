"""PieceItem — draggable chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from wechess.core.enums import Color
from wechess.core.piece import Piece, piece_symbol
from wechess.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board, drawn as a Unicode glyph.

    Both colours use the solid glyph; *fill* and *outline* tell them apart.

    Stores its logical *square* and supports drag & drop.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece_symbol(Color.BLACK, piece.piece_type))
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None

        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self._update_size(tile_size)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    def offset(self) -> QPointF:
        """Offset that centres the glyph inside its tile."""
        rect = self.boundingRect()
        return QPointF(
            (self._tile_size - rect.width()) / 2.0,
            (self._tile_size - rect.height()) / 2.0,
        )

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        """Cleanup after a successful drop."""
        self._finish_drag()

    @property
    def is_dragging(self) -> bool:
        return self._drag_origin is not None

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setOpacity(1.0)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(8, int(size * self._FONT_RATIO)))
        self.setFont(font)

"""BoardScene — QGraphicsScene that draws the chessboard and pieces.

The scene holds no game rules.  It renders whatever pieces and highlights
it is given and turns mouse gestures into session commands
(:class:`Click`, :class:`DragBegin`, :class:`Drop`) handed to a dispatcher.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from wechess.core.enums import Color
from wechess.core.piece import Piece
from wechess.core.types import Square, square_name
from wechess.game.commands import Click, Command, DragBegin, Drop
from wechess.game.session import CommandResult
from wechess.game.view import HighlightTag
from wechess.ui.board.piece_item import PieceItem
from wechess.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from wechess.game.session import GameSession

Dispatcher = Callable[[Command], CommandResult]


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items."""

    TILE = 80  # px per square

    _DRAG_THRESHOLD = 4.0  # px of movement before a press becomes a drag

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._flipped = False
        self._dispatch: Dispatcher | None = None

        # Displayed state
        self._pieces: dict[Square, Piece] = {}
        self._highlights: dict[Square, HighlightTag] = {}
        self._check_square: Square | None = None

        # Interaction state
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True
        self._press_sq: Square | None = None
        self._press_pos: QPointF | None = None
        self._dragging_item: PieceItem | None = None
        self._drag_offset = QPointF()

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_dispatcher(self, dispatch: Dispatcher | None) -> None:
        """Install the callable that receives board commands."""
        self._dispatch = dispatch

    def show_session(self, session: GameSession) -> None:
        """Redraw pieces, highlights and check marker from *session*."""
        self.set_position(session.pieces())
        self.set_highlights(session.highlights)
        self.highlight_check(session.king_in_check())

    def set_position(self, pieces: Mapping[Square, Piece]) -> None:
        """Update the displayed pieces (full redraw)."""
        self._pieces = dict(pieces)
        self._dragging_item = None
        self._sync_pieces()

    def set_highlights(self, highlights: Mapping[Square, HighlightTag]) -> None:
        self._highlights = dict(highlights)
        self._draw_highlights()

    def highlight_check(self, square: Square | None) -> None:
        """Mark the king in check on *square*, or clear the marker."""
        self._check_square = square
        self._clear_items(self._check_items)
        if square is None:
            return
        rect = self._make_highlight(square, self._theme.highlight_check)
        rect.setZValue(0.6)
        self._check_items.append(rect)

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._cancel_gesture()

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw_all()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw_all()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination highlights."""
        self._show_legal_moves = visible
        self._draw_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw_all(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._draw_highlights()
        self.highlight_check(self._check_square)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 6))

        for index in range(64):
            f, r = index % 8, index // 8
            sq = square_name(index)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers (left edge)
            if vf == 0:
                self._add_coord(str(r + 1), font, text_color, vf * t + 2, vr * t + 1)

            # File letters (bottom edge)
            if vr == 7:
                self._add_coord(
                    chr(ord("a") + f), font, text_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _draw_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        for sq, tag in self._highlights.items():
            if tag == HighlightTag.SELECTED:
                color = self._theme.highlight_selected
            elif self._show_legal_moves:
                color = self._theme.highlight_legal
            else:
                continue
            self._highlight_items.append(self._make_highlight(sq, color))

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the displayed pieces."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        for sq, piece in self._pieces.items():
            if piece.color == Color.WHITE:
                fill, outline = self._theme.piece_white, self._theme.piece_black
            else:
                fill, outline = self._theme.piece_black, self._theme.piece_white
            item = PieceItem(piece, sq, t, fill, outline)
            item.setPos(self._square_origin(sq) + item.offset())
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        self._press_sq = self._pos_to_square(event.scenePos())
        self._press_pos = event.scenePos()
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or self._press_sq is None or self._press_pos is None:
            return super().mouseMoveEvent(event)

        pos = event.scenePos()
        if self._dragging_item is None:
            delta = pos - self._press_pos
            if abs(delta.x()) + abs(delta.y()) < self._DRAG_THRESHOLD:
                return
            self._begin_drag(self._press_sq)
        if self._dragging_item is not None:
            self._dragging_item.setPos(pos - self._drag_offset)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or self._press_sq is None:
            return super().mouseReleaseEvent(event)

        if self._dragging_item is not None:
            self._finish_drop(self._pos_to_square(event.scenePos()))
        else:
            self._issue(Click(self._press_sq))
        self._press_sq = None
        self._press_pos = None

    # ── Gesture helpers ──────────────────────────────────────────────────

    def _begin_drag(self, sq: Square) -> None:
        item = self._piece_items.get(sq)
        if item is None:
            # Pressing an empty square and moving is not a drag.
            self._press_sq = None
            return
        if not self._issue(DragBegin(sq)).ok:
            self._press_sq = None
            return
        # The dispatcher may have redrawn the pieces; pick up the fresh item.
        item = self._piece_items.get(sq)
        if item is None or self._press_pos is None:
            self._press_sq = None
            return
        self._drag_offset = self._press_pos - item.pos()
        item.start_drag()
        self._dragging_item = item

    def _finish_drop(self, target: Square | None) -> None:
        item = self._dragging_item
        self._dragging_item = None
        if item is None:
            return
        source = item.square
        result = self._issue(Drop(source, target))
        # A successful dispatch usually re-syncs pieces, removing *item*.
        if item.scene() is self:
            if result.ok:
                item.finish_drag()
            else:
                item.cancel_drag()

    def _cancel_gesture(self) -> None:
        if self._dragging_item is not None:
            self._dragging_item.cancel_drag()
        self._dragging_item = None
        self._press_sq = None
        self._press_pos = None

    def _issue(self, command: Command) -> CommandResult:
        if self._dispatch is None:
            return CommandResult(ok=False)
        return self._dispatch(command)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _square_origin(self, sq: Square) -> QPointF:
        file, rank = ord(sq[0]) - ord("a"), int(sq[1]) - 1
        vf, vr = self._visual_coords(file, rank)
        return QPointF(vf * self.TILE, vr * self.TILE)

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        if pos.x() < 0 or pos.y() < 0:
            return None
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return square_name(r * 8 + f)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        origin = self._square_origin(sq)
        rect = QGraphicsRectItem(origin.x(), origin.y(), t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

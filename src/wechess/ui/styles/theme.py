"""Visual theme constants and QSS styles for WeChess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_legal: QColor  # legal move targets
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_legal=QColor(20, 85, 30, 90),  # green overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_legal=QColor(20, 85, 30, 90),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_legal=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by settings name; unknown names fall back to the default."""
        factories = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return factories.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Green")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#errorLabel {
    color: #ff8a80;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QComboBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 4px 8px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""

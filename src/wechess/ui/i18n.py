"""Internationalisation strings for WeChess UI chrome.

Game status and move errors come from the game layer and stay in
English; only window furniture is translated here.

Usage::

    from wechess.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_reset)          # "Новая партия"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_reset: str
    menu_timer: str
    menu_flip_board: str
    menu_quit: str
    status_label: str  # "Status: {status}"
    minutes_option: str  # "{minutes} min"

    # ── ClockWidget ──────────────────────────────────────────────────────
    clock_white: str
    clock_black: str
    turn_to_move: str  # "{color} to move"

    # ── CapturedPanel ────────────────────────────────────────────────────
    captured_white: str
    captured_black: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_reset: str
    btn_flip: str
    timer_label: str

    # ── PromotionDialog ──────────────────────────────────────────────────
    promote_title: str
    promote_label: str
    promote_cancel: str
    piece_queen: str
    piece_rook: str
    piece_bishop: str
    piece_knight: str


_EN = Strings(
    window_title="WeChess",
    menu_game="&Game",
    menu_reset="&Reset Game",
    menu_timer="&Timer",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    status_label="Status: {status}",
    minutes_option="{minutes} min",
    clock_white="White",
    clock_black="Black",
    turn_to_move="{color} to move",
    captured_white="White",
    captured_black="Black",
    btn_reset="Reset Game",
    btn_flip="Flip",
    timer_label="Timer:",
    promote_title="Promotion",
    promote_label="Choose your piece",
    promote_cancel="Cancel",
    piece_queen="Queen",
    piece_rook="Rook",
    piece_bishop="Bishop",
    piece_knight="Knight",
)

_RU = Strings(
    window_title="WeChess",
    menu_game="&Партия",
    menu_reset="&Новая партия",
    menu_timer="&Часы",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    status_label="Статус: {status}",
    minutes_option="{minutes} мин",
    clock_white="Белые",
    clock_black="Чёрные",
    turn_to_move="Ход: {color}",
    captured_white="Белые",
    captured_black="Чёрные",
    btn_reset="Новая партия",
    btn_flip="Перевернуть",
    timer_label="Часы:",
    promote_title="Превращение пешки",
    promote_label="Выберите фигуру",
    promote_cancel="Отмена",
    piece_queen="Ферзь",
    piece_rook="Ладья",
    piece_bishop="Слон",
    piece_knight="Конь",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)

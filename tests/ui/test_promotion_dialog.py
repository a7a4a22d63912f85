"""Tests for PromotionDialog choice handling."""

from __future__ import annotations

from PyQt6.QtWidgets import QDialog

from wechess.core.enums import PROMOTION_PIECES, Color, PieceType
from wechess.ui.dialogs.promotion_dialog import PromotionDialog


def test_buttons_follow_promotion_order(qapp: object) -> None:
    dlg = PromotionDialog(Color.WHITE)
    assert list(dlg._buttons) == list(PROMOTION_PIECES)
    assert dlg._buttons[PieceType.QUEEN].text() == "♕"


def test_black_glyphs(qapp: object) -> None:
    dlg = PromotionDialog(Color.BLACK)
    assert dlg._buttons[PieceType.KNIGHT].text() == "♞"


def test_choosing_accepts_with_piece(qapp: object) -> None:
    dlg = PromotionDialog(Color.WHITE)
    dlg._buttons[PieceType.ROOK].click()
    assert dlg.result() == QDialog.DialogCode.Accepted
    assert dlg.selected == PieceType.ROOK


def test_cancel_rejects(qapp: object) -> None:
    dlg = PromotionDialog(Color.WHITE)
    dlg._cancel.click()
    assert dlg.result() == QDialog.DialogCode.Rejected

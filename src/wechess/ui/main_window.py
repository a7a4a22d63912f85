"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from wechess.core.enums import Color, PieceType
from wechess.game.commands import (
    CancelPromotion,
    Command,
    Reset,
    ResolvePromotion,
    SetClockBudget,
    Tick,
)
from wechess.game.interfaces import GamePhase, TimeControl
from wechess.game.session import CommandResult, GameSession
from wechess.game.view import GameStatus
from wechess.ui.board.board_view import BoardView
from wechess.ui.dialogs.promotion_dialog import PromotionDialog
from wechess.ui.i18n import set_language, t
from wechess.ui.panels.captured_panel import CapturedPanel
from wechess.ui.panels.clock_widget import ClockWidget
from wechess.ui.panels.control_panel import ControlPanel
from wechess.ui.settings import AppSettings
from wechess.ui.styles.theme import BoardTheme
from wechess.ui.ticker import ClockTicker

_LOGGER = logging.getLogger(__name__)

PromotionAsker = Callable[[Color, QWidget], "PieceType | None"]


class MainWindow(QMainWindow):
    """Main application window for WeChess."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        session: GameSession | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(560, 720)
        self.resize(640, 820)

        self._settings = settings or AppSettings()
        self._session = session or GameSession(self._settings.timer_minutes)
        self._ticker = ClockTicker(self._on_tick, self)
        self._ask_promotion_piece: PromotionAsker = PromotionDialog.ask
        self._timer_actions: dict[int, QAction] = {}

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self._session.events.on_changed.append(self._on_session_changed)
        self._session.events.on_game_over.append(self._on_game_over)

        self._apply_settings()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._clock_widget = ClockWidget()
        root.addWidget(self._clock_widget)

        self._captured_white = CapturedPanel(Color.WHITE)
        root.addWidget(self._captured_white)

        self._board_view = BoardView()
        self._board_view.board_scene.set_dispatcher(self.dispatch)
        root.addWidget(self._board_view, stretch=1)

        self._captured_black = CapturedPanel(Color.BLACK)
        root.addWidget(self._captured_black)

        self._status_label = QLabel()
        root.addWidget(self._status_label)

        self._error_label = QLabel()
        self._error_label.setObjectName("errorLabel")
        root.addWidget(self._error_label)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._game_menu = menu_bar.addMenu("")
        assert self._game_menu is not None

        self._reset_action = QAction(self)
        self._reset_action.triggered.connect(self._on_reset)
        self._game_menu.addAction(self._reset_action)

        self._flip_action = QAction(self)
        self._flip_action.triggered.connect(self._on_flip)
        self._game_menu.addAction(self._flip_action)

        self._game_menu.addSeparator()
        self._quit_action = QAction(self)
        self._quit_action.triggered.connect(self.close)
        self._game_menu.addAction(self._quit_action)

        self._timer_menu = menu_bar.addMenu("")
        assert self._timer_menu is not None
        group = QActionGroup(self)
        group.setExclusive(True)
        for minutes in TimeControl.OPTIONS:
            action = QAction(self)
            action.setCheckable(True)
            action.triggered.connect(
                lambda checked, m=minutes: self._on_budget_changed(m)
            )
            group.addAction(action)
            self._timer_menu.addAction(action)
            self._timer_actions[minutes] = action

    def _connect_signals(self) -> None:
        self._control_panel.reset_clicked.connect(self._on_reset)
        self._control_panel.flip_clicked.connect(self._on_flip)
        self._control_panel.budget_changed.connect(self._on_budget_changed)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._game_menu.setTitle(s.menu_game)
        self._reset_action.setText(s.menu_reset)
        self._flip_action.setText(s.menu_flip_board)
        self._quit_action.setText(s.menu_quit)
        self._timer_menu.setTitle(s.menu_timer)
        for minutes, action in self._timer_actions.items():
            action.setText(s.minutes_option.format(minutes=minutes))
        self._clock_widget.retranslate_ui()
        self._captured_white.retranslate_ui()
        self._captured_black.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._refresh()

    # ── Settings ─────────────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        self._sync_timer_choice(self._session.time_control.minutes_per_side)

    # ── Commands ─────────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    def set_promotion_asker(self, asker: PromotionAsker) -> None:
        """Replace the promotion prompt (tests use a non-modal stand-in)."""
        self._ask_promotion_piece = asker

    def dispatch(self, command: Command) -> CommandResult:
        """Forward *command* to the session; prompt for promotion if parked."""
        result = self._session.dispatch(command)
        if result.move is not None and result.move.pending:
            self._prompt_promotion()
        return result

    def _prompt_promotion(self) -> None:
        choice = self._ask_promotion_piece(self._session.turn, self)
        if choice is None:
            self._session.dispatch(CancelPromotion())
        else:
            self._session.dispatch(ResolvePromotion(choice))

    def _on_tick(self) -> None:
        self._session.dispatch(Tick())

    def _on_reset(self) -> None:
        self.dispatch(Reset())

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_budget_changed(self, minutes: int) -> None:
        self._settings.timer_minutes = minutes
        self.dispatch(SetClockBudget(minutes))
        self._sync_timer_choice(minutes)

    def _sync_timer_choice(self, minutes: int) -> None:
        self._control_panel.set_minutes(minutes)
        action = self._timer_actions.get(minutes)
        if action is not None:
            action.setChecked(True)

    # ── Session events ───────────────────────────────────────────────────

    def _on_session_changed(self, _session: GameSession) -> None:
        self._refresh()

    def _on_game_over(self, status: GameStatus) -> None:
        _LOGGER.info("Game finished: %s", status.status_text)

    def _refresh(self) -> None:
        session = self._session
        status = session.status

        self._board_view.board_scene.show_session(session)
        self._board_view.board_scene.set_interactive(
            session.phase not in (GamePhase.GAME_OVER, GamePhase.AWAITING_PROMOTION)
        )

        self._captured_white.set_pieces(session.captured.white)
        self._captured_black.set_pieces(session.captured.black)

        clock = session.clock
        self._clock_widget.update_state(clock, status.turn_color)
        self._clock_widget.setVisible(not status.is_game_over)
        self._ticker.set_running(clock.running and not status.is_game_over)

        # The clock banner already shows whose turn it is.
        if status.is_game_over:
            self._status_label.setText(t().status_label.format(status=status.status_text))
            self._status_label.setVisible(True)
        else:
            self._status_label.setVisible(False)

        error = session.last_error
        self._error_label.setText(f"⚠ {error}" if error else "")
        self._error_label.setVisible(bool(error))

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._ticker.stop()
        super().closeEvent(event)

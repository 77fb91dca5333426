from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from swiftywords.core.controller import GameController
from swiftywords.core.errors import LevelError, LevelNotFoundError
from swiftywords.core.state import (
    AnswersChanged,
    ButtonChanged,
    CluesChanged,
    CurrentAnswerChanged,
    Effect,
    LevelChanged,
    LevelCompleteEvent,
    ScoreChanged,
)
from swiftywords.ui.colors import GameColors
from swiftywords.ui.custom_overlay import MessageOverlay
from swiftywords.ui.fragment_widgets import FragmentGrid

logger = logging.getLogger(__name__)


def _panel() -> QFrame:
    frame = QFrame()
    frame.setObjectName("panel")
    frame.setStyleSheet(
        f"""
        QFrame#panel {{
            background: {GameColors.CARD_BG};
            border: 1px solid {GameColors.CARD_BORDER};
            border-radius: 16px;
        }}
        """
    )
    return frame


def _action_button(text: str, color: str) -> QPushButton:
    btn = QPushButton(text)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setMinimumHeight(44)
    btn.setStyleSheet(
        f"""
        QPushButton {{
            background: {color};
            color: white;
            border: none;
            border-radius: 12px;
            font-size: 15px;
            font-weight: 700;
            padding: 8px 28px;
        }}
        QPushButton:hover {{ background: {GameColors.PRIMARY_DARK}; }}
        """
    )
    return btn


class MainWindow(QMainWindow):
    """Single game screen: clues, answers, the current answer and the fragment board.

    All game rules live in :class:`GameController`; this window forwards clicks
    to it and renders the effects it emits.
    """

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self._clues_label: Optional[QLabel] = None
        self._answers_label: Optional[QLabel] = None
        self._current_answer: Optional[QLineEdit] = None
        self._score_label: Optional[QLabel] = None
        self._level_label: Optional[QLabel] = None
        self._grid: Optional[FragmentGrid] = None

        self._build_ui()
        self._controller.subscribe(self._render)
        QTimer.singleShot(0, self._view_ready)

    def _build_ui(self) -> None:
        self.setWindowTitle("Swifty Words")
        central = QWidget()
        central.setObjectName("central")
        central.setStyleSheet(
            f"""
            QWidget#central {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {GameColors.BG_TOP}, stop:1 {GameColors.BG_BOTTOM});
            }}
            """
        )
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        header = QHBoxLayout()
        self._level_label = QLabel()
        self._level_label.setStyleSheet(f"color: {GameColors.PRIMARY}; font-size: 18px; font-weight: 800;")
        header.addWidget(self._level_label)
        header.addStretch(1)
        self._score_label = QLabel()
        self._score_label.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 700;")
        header.addWidget(self._score_label)
        root.addLayout(header)

        panels = QHBoxLayout()
        panels.setSpacing(16)
        clues_panel = _panel()
        clues_layout = QVBoxLayout(clues_panel)
        clues_layout.setContentsMargins(18, 14, 18, 14)
        self._clues_label = QLabel()
        self._clues_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self._clues_label.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 16px; line-height: 150%;")
        self._clues_label.setWordWrap(True)
        clues_layout.addWidget(self._clues_label)
        panels.addWidget(clues_panel, 3)

        answers_panel = _panel()
        answers_layout = QVBoxLayout(answers_panel)
        answers_layout.setContentsMargins(18, 14, 18, 14)
        self._answers_label = QLabel()
        self._answers_label.setAlignment(Qt.AlignRight | Qt.AlignTop)
        self._answers_label.setStyleSheet(f"color: {GameColors.TEXT_SECONDARY}; font-size: 16px;")
        answers_layout.addWidget(self._answers_label)
        panels.addWidget(answers_panel, 1)
        root.addLayout(panels, 2)

        self._current_answer = QLineEdit()
        self._current_answer.setReadOnly(True)
        self._current_answer.setAlignment(Qt.AlignCenter)
        self._current_answer.setPlaceholderText("Tap letters to guess")
        self._current_answer.setStyleSheet(
            f"""
            QLineEdit {{
                background: white;
                color: {GameColors.PRIMARY_DARK};
                border: 2px solid {GameColors.TILE_BORDER};
                border-radius: 14px;
                font-size: 28px;
                font-weight: 800;
                padding: 8px;
            }}
            """
        )
        root.addWidget(self._current_answer)

        actions = QHBoxLayout()
        actions.addStretch(1)
        submit_btn = _action_button("SUBMIT", GameColors.PRIMARY)
        submit_btn.clicked.connect(self._on_submit)
        actions.addWidget(submit_btn)
        clear_btn = _action_button("CLEAR", GameColors.CORAL)
        clear_btn.clicked.connect(self._controller.clear_pressed)
        actions.addWidget(clear_btn)
        actions.addStretch(1)
        root.addLayout(actions)

        self._grid = FragmentGrid(self._controller.settings.button_count)
        self._grid.fragment_tapped.connect(self._controller.fragment_button_tapped)
        root.addWidget(self._grid, 3)

        self._level_complete_overlay = MessageOverlay(central)
        self._level_complete_overlay.closed.connect(self._on_level_complete_acknowledged)
        self._level_complete_overlay.hide()

        self._message_overlay = MessageOverlay(central, dismiss_on_backdrop=True)
        self._message_overlay.hide()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _view_ready(self) -> None:
        try:
            self._controller.view_ready()
        except LevelError as e:
            logger.error("Could not start level %d: %s", e.level, e)
            self._message_overlay.show_message("Level unavailable", str(e), icon="!")

    def _on_submit(self) -> None:
        self._controller.submit_pressed()

    def _on_level_complete_acknowledged(self) -> None:
        try:
            self._controller.level_complete_acknowledged()
        except LevelNotFoundError:
            logger.info("No level after %d", self._controller.state.level)
            self._message_overlay.show_message(
                "All done!",
                f"You finished every level with a score of {self._controller.state.score}.",
                button_text="Keep playing",
            )
        except LevelError as e:
            logger.error("Could not load level %d: %s", e.level, e)
            self._message_overlay.show_message("Level unavailable", str(e), icon="!")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, effect: Effect) -> None:
        if isinstance(effect, CluesChanged):
            self._clues_label.setText(effect.text)
        elif isinstance(effect, AnswersChanged):
            self._answers_label.setText(effect.text)
        elif isinstance(effect, CurrentAnswerChanged):
            self._current_answer.setText(effect.text)
        elif isinstance(effect, ScoreChanged):
            self._score_label.setText(effect.text)
        elif isinstance(effect, LevelChanged):
            self._level_label.setText(f"Level {effect.level}")
        elif isinstance(effect, ButtonChanged):
            self._grid.set_button(effect.button_id, effect.label, effect.hidden)
        elif isinstance(effect, LevelCompleteEvent):
            self._level_complete_overlay.show_message(
                "Well done!",
                "Are you ready for the next level?",
                button_text="Let's go!",
            )

    def closeEvent(self, event: QCloseEvent) -> None:
        self._controller.unsubscribe(self._render)
        super().closeEvent(event)

"""In-window message overlay (level completed, out of levels, load errors)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from swiftywords.ui.colors import GameColors


def _themed_card_container(radius: int = 20, object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(400)
    container.setMaximumWidth(480)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: #ffffff;
            border: 1px solid rgba(0, 131, 143, 0.12);
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 80, 100, 25))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.2);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def _primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {GameColors.PRIMARY_LIGHT}, stop:1 {GameColors.PRIMARY});
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {GameColors.PRIMARY}; }}
    """


class MessageOverlay(QWidget):
    """Card with a title, a message and one button, drawn over its parent.

    ``closed`` fires when the button is pressed. With ``dismiss_on_backdrop``
    a click outside the card closes it too; the level-complete prompt keeps it
    off so the player has to acknowledge.
    """

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None, dismiss_on_backdrop: bool = False) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        on_backdrop = self._close if dismiss_on_backdrop else (lambda: None)
        main_layout.addWidget(_overlay_background(self, on_backdrop), 0, 0)

        container = _themed_card_container(object_name="messageContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        header = QHBoxLayout()
        header.setSpacing(12)
        icon_box = QFrame()
        icon_box.setFixedSize(44, 44)
        icon_box.setStyleSheet(
            f"""
            QFrame {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {GameColors.BG_TOP}, stop:1 #b2ebf2);
                border-radius: 12px;
            }}
            """
        )
        icon_layout = QVBoxLayout(icon_box)
        icon_layout.setContentsMargins(0, 0, 0, 0)
        self._icon_label = QLabel("✓")
        self._icon_label.setStyleSheet(f"color: {GameColors.PRIMARY}; font-size: 24px; font-weight: 900;")
        self._icon_label.setAlignment(Qt.AlignCenter)
        icon_layout.addWidget(self._icon_label)
        header.addWidget(icon_box, 0)

        self._title_label = QLabel()
        self._title_label.setStyleSheet(f"color: {GameColors.PRIMARY}; font-size: 18px; font-weight: 800;")
        header.addWidget(self._title_label, 0)
        header.addStretch(1)
        content.addLayout(header)

        self._message_label = QLabel()
        self._message_label.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 500;")
        self._message_label.setWordWrap(True)
        content.addWidget(self._message_label, 0)

        self._ok_button = QPushButton()
        self._ok_button.setStyleSheet(_primary_button_style())
        self._ok_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._ok_button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._ok_button.clicked.connect(self._close)
        content.addWidget(self._ok_button, 0)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)

    def show_message(self, title: str, message: str, button_text: str = "OK", icon: str = "✓") -> None:
        self._icon_label.setText(icon)
        self._title_label.setText(title)
        self._message_label.setText(message)
        self._ok_button.setText(button_text)
        self.show()
        self.raise_()

    def _close(self) -> None:
        self.hide()
        self.closed.emit()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)

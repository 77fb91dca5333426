"""Grid of fragment tiles the player taps to build an answer."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from swiftywords.ui.colors import tile_style


class FragmentGrid(QWidget):
    """Fixed set of tiles, addressed by button id.

    Hidden tiles keep their grid cell so the board does not reflow while the
    player is building an answer.
    """

    fragment_tapped = Signal(int)

    def __init__(self, button_count: int, columns: int = 5, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)
        self._buttons: list[QPushButton] = []
        style = tile_style()
        for button_id in range(button_count):
            btn = QPushButton()
            btn.setStyleSheet(style)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            btn.setMinimumSize(96, 52)
            policy = btn.sizePolicy()
            policy.setRetainSizeWhenHidden(True)
            btn.setSizePolicy(policy)
            btn.clicked.connect(lambda _checked=False, i=button_id: self.fragment_tapped.emit(i))
            layout.addWidget(btn, button_id // columns, button_id % columns)
            self._buttons.append(btn)

    def set_button(self, button_id: int, label: str, hidden: bool) -> None:
        btn = self._buttons[button_id]
        btn.setText(label)
        btn.setVisible(not hidden)

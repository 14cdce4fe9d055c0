from __future__ import annotations

from typing import Optional

from PyQt6 import QtWidgets


class AppHeader(QtWidgets.QWidget):
    """Shared header with optional Back + title + trailing action widgets."""

    def __init__(
        self,
        *,
        title: str,
        on_back: Optional[callable] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        if on_back:
            back_btn = QtWidgets.QPushButton("Back")
            back_btn.clicked.connect(on_back)
            layout.addWidget(back_btn)

        self.title_label = QtWidgets.QLabel(title)
        self.title_label.setStyleSheet("font-size: 24px; font-weight: bold; color: #1e3a8a;")
        layout.addWidget(self.title_label)
        layout.addStretch()

        self._actions_layout = QtWidgets.QHBoxLayout()
        self._actions_layout.setContentsMargins(0, 0, 0, 0)
        self._actions_layout.setSpacing(6)
        layout.addLayout(self._actions_layout)

    def add_action_widget(self, widget: QtWidgets.QWidget) -> None:
        self._actions_layout.addWidget(widget)

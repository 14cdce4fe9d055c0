from __future__ import annotations

from typing import Dict, Optional

from PyQt6 import QtCore, QtWidgets

from app_ui.ui_helpers import terms
from lab_catalog.models import OS_VARIANTS
from lab_catalog.resolver import COMMAND_PULL, COMMAND_RUN
from lab_catalog.session import COPIED, DetailView, PortalSession

_CODE_STYLE = (
    "QLabel { background: #f3f4f6; border-radius: 6px; padding: 6px;"
    " font-family: monospace; color: #1f2937; }"
)
_TOGGLE_STYLE = (
    "QPushButton { padding: 4px 12px; border-radius: 6px; background: #e5e7eb; color: #374151; }"
    "QPushButton:checked { background: #2563eb; color: white; }"
)


class _CommandBlock(QtWidgets.QWidget):
    def __init__(
        self,
        title: str,
        kind: str,
        dialog: "LabDetailDialog",
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.kind = kind
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        title_label = QtWidgets.QLabel(title)
        title_label.setStyleSheet("font-weight: bold; color: #374151;")
        self.code_label = QtWidgets.QLabel("")
        self.code_label.setStyleSheet(_CODE_STYLE)
        self.code_label.setWordWrap(True)
        self.code_label.setTextInteractionFlags(
            QtCore.Qt.TextInteractionFlag.TextSelectableByMouse
        )

        btn_row = QtWidgets.QHBoxLayout()
        self.copy_btn = QtWidgets.QPushButton("Copy")
        self.copy_btn.clicked.connect(lambda: dialog.copy_command(kind))
        self.run_btn = QtWidgets.QPushButton("Run")
        self.run_btn.clicked.connect(lambda: dialog.run_command(kind))
        btn_row.addWidget(self.copy_btn)
        btn_row.addWidget(self.run_btn)
        btn_row.addStretch()

        layout.addWidget(title_label)
        layout.addWidget(self.code_label)
        layout.addLayout(btn_row)

    def set_command(self, command: Optional[str]) -> None:
        self.code_label.setText(command or "")


class LabDetailDialog(QtWidgets.QDialog):
    """Detail view for the image currently open in the session."""

    def __init__(self, session: PortalSession, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self.setMinimumWidth(560)

        layout = QtWidgets.QVBoxLayout(self)
        self.title_label = QtWidgets.QLabel("")
        self.title_label.setStyleSheet("font-size: 20px; font-weight: bold; color: #4338ca;")
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        toggle_row = QtWidgets.QHBoxLayout()
        toggle_row.addStretch()
        self.os_group = QtWidgets.QButtonGroup(self)
        self.os_group.setExclusive(True)
        self.os_buttons: Dict[str, QtWidgets.QPushButton] = {}
        for variant in OS_VARIANTS:
            btn = QtWidgets.QPushButton(terms.os_label(variant))
            btn.setCheckable(True)
            btn.setStyleSheet(_TOGGLE_STYLE)
            btn.clicked.connect(lambda _checked=False, v=variant: self._on_variant_clicked(v))
            self.os_group.addButton(btn)
            self.os_buttons[variant] = btn
            toggle_row.addWidget(btn)
        toggle_row.addStretch()
        layout.addLayout(toggle_row)

        self.pull_block = _CommandBlock(terms.PULL_COMMAND, COMMAND_PULL, self)
        self.run_block = _CommandBlock(terms.RUN_COMMAND, COMMAND_RUN, self)
        layout.addWidget(self.pull_block)
        layout.addWidget(self.run_block)

        self.instructions_label = QtWidgets.QLabel("")
        self.instructions_label.setWordWrap(True)
        self.instructions_label.setStyleSheet("color: #4b5563; font-style: italic;")
        self.notes_label = QtWidgets.QLabel("")
        self.notes_label.setWordWrap(True)
        self.notes_label.setStyleSheet("color: #6b7280; font-size: 11px;")
        layout.addWidget(self.instructions_label)
        layout.addWidget(self.notes_label)

        self.status_label = QtWidgets.QLabel("")
        self.status_label.setStyleSheet("color: #1b7f3a;")
        layout.addWidget(self.status_label)

        close_row = QtWidgets.QHBoxLayout()
        close_row.addStretch()
        close_btn = QtWidgets.QPushButton("Close")
        close_btn.clicked.connect(self.reject)
        close_row.addWidget(close_btn)
        layout.addLayout(close_row)

        self.refresh()

    def current_view(self) -> Optional[DetailView]:
        return self.session.detail_view()

    def refresh(self) -> None:
        view = self.current_view()
        if view is None:
            self.reject()
            return
        self.setWindowTitle(view.image.title)
        self.title_label.setText(view.image.title)
        for variant, btn in self.os_buttons.items():
            btn.setChecked(variant == view.variant)
        resolved = view.resolved
        self.pull_block.set_command(resolved.pull_command)
        self.run_block.set_command(resolved.run_command)
        self.instructions_label.setText(resolved.instructions or "")
        self.instructions_label.setVisible(bool(resolved.instructions))
        self.notes_label.setText(resolved.notes or "")
        self.notes_label.setVisible(bool(resolved.notes))

    def _on_variant_clicked(self, variant: str) -> None:
        view = self.current_view()
        if view is None:
            return
        self.session.set_variant(view.image.id, variant)
        self.status_label.setText("")
        self.refresh()

    def copy_command(self, kind: str) -> None:
        if self.session.copy_command(kind) == COPIED:
            self.status_label.setText("Copied to clipboard.")
            QtCore.QTimer.singleShot(2000, self.status_label.clear)

    def run_command(self, kind: str) -> None:
        self.status_label.setText("")
        self.session.run_command(kind)

    def done(self, result: int) -> None:
        self.session.close_detail()
        super().done(result)

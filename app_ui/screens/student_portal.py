from __future__ import annotations

import logging
from typing import Callable, List, Optional

from PyQt6 import QtCore, QtWidgets

from app_ui.screens.lab_detail import LabDetailDialog
from app_ui.ui_helpers import terms
from app_ui.ui_helpers.catalog_worker import CatalogWorker
from app_ui.widgets.app_header import AppHeader
from lab_catalog.errors import CatalogLoadError
from lab_catalog.models import LabImage
from lab_catalog.session import PortalSession

logger = logging.getLogger("dockerlab.ui.portal")


class _LabTile(QtWidgets.QFrame):
    def __init__(self, image: LabImage, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.image = image
        self.setFrameShape(QtWidgets.QFrame.Shape.StyledPanel)
        self.setStyleSheet("QFrame { border: 1px solid #e5e7eb; border-radius: 10px; background: white; }")

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        title_label = QtWidgets.QLabel(image.title)
        title_label.setStyleSheet("font-size: 15px; font-weight: bold; color: #4338ca; border: none;")
        title_label.setWordWrap(True)
        layout.addWidget(title_label)


class StudentPortalScreen(QtWidgets.QWidget):
    def __init__(
        self,
        session: PortalSession,
        *,
        on_back: Optional[Callable[[], None]] = None,
        load_on_start: bool = True,
    ) -> None:
        super().__init__()
        self.session = session
        self.load_thread: Optional[QtCore.QThread] = None
        self._load_worker: Optional[CatalogWorker] = None
        self.detail_dialog: Optional[LabDetailDialog] = None

        layout = QtWidgets.QVBoxLayout(self)
        header = AppHeader(title=terms.PORTAL_TITLE, on_back=on_back)
        self.refresh_btn = QtWidgets.QPushButton("Refresh")
        self.refresh_btn.clicked.connect(self.refresh_catalog)
        self.refresh_btn.setEnabled(session.catalog.can_fetch)
        header.add_action_widget(self.refresh_btn)
        layout.addWidget(header)

        banner = QtWidgets.QLabel("")
        banner.setStyleSheet("color: #a33;")
        banner.setWordWrap(True)
        banner.setVisible(False)
        self.banner = banner
        layout.addWidget(banner)

        self.search_edit = QtWidgets.QLineEdit()
        self.search_edit.setPlaceholderText(terms.SEARCH_PLACEHOLDER)
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.textChanged.connect(self._on_search_changed)
        layout.addWidget(self.search_edit)

        self.empty_label = QtWidgets.QLabel(terms.NO_MATCHES)
        self.empty_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet("color: #6b7280; font-style: italic;")
        layout.addWidget(self.empty_label)

        self.lab_list = QtWidgets.QListWidget()
        self.lab_list.setSpacing(4)
        self.lab_list.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.lab_list.itemClicked.connect(self._on_item_clicked)
        self.lab_list.itemActivated.connect(self._on_item_clicked)
        layout.addWidget(self.lab_list, stretch=1)

        self._build_lab_list()
        if load_on_start and session.catalog.can_fetch:
            self.refresh_catalog()

    # --- catalog loading
    def refresh_catalog(self) -> None:
        if not self.session.catalog.can_fetch or self.load_thread:
            return
        worker = CatalogWorker(self.session.catalog.fetch)
        thread = QtCore.QThread()
        self.load_thread = thread
        self._load_worker = worker
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(self._on_load_finished)
        worker.error.connect(self._on_load_error)
        self.refresh_btn.setEnabled(False)
        thread.start()

    def _finish_thread(self) -> None:
        thread = self.load_thread
        if thread is not None:
            thread.quit()
            thread.wait()
        self.load_thread = None
        self._load_worker = None
        self.refresh_btn.setEnabled(self.session.catalog.can_fetch)

    @QtCore.pyqtSlot(object)
    def _on_load_finished(self, images: List[LabImage]) -> None:
        self._finish_thread()
        self.on_catalog_loaded(images)

    @QtCore.pyqtSlot(object)
    def _on_load_error(self, error: CatalogLoadError) -> None:
        self._finish_thread()
        self.on_catalog_failed(error)

    def on_catalog_loaded(self, images: List[LabImage]) -> None:
        self.session.catalog.replace(images)
        self.banner.setVisible(False)
        self._build_lab_list()
        if self.detail_dialog is not None:
            self.detail_dialog.refresh()

    def on_catalog_failed(self, error: CatalogLoadError) -> None:
        self.session.catalog.report_failure(error)
        self.banner.setText(f"Could not load labs: {error}")
        self.banner.setVisible(True)

    # --- list
    def _on_search_changed(self, text: str) -> None:
        self.session.set_query(text)
        self._build_lab_list()

    def _build_lab_list(self) -> None:
        self.lab_list.clear()
        images = self.session.visible_images()
        for image in images:
            item = QtWidgets.QListWidgetItem()
            item.setData(QtCore.Qt.ItemDataRole.UserRole, image.id)
            tile = _LabTile(image)
            item.setSizeHint(tile.sizeHint())
            self.lab_list.addItem(item)
            self.lab_list.setItemWidget(item, tile)
        self.empty_label.setVisible(not images)
        self.lab_list.setVisible(bool(images))

    def _on_item_clicked(self, item: QtWidgets.QListWidgetItem) -> None:
        image_id = item.data(QtCore.Qt.ItemDataRole.UserRole)
        if isinstance(image_id, str):
            self.open_lab(image_id)

    # --- detail view
    def open_lab(self, image_id: str) -> Optional[LabDetailDialog]:
        if self.detail_dialog is not None:
            self.detail_dialog.reject()
        self.session.open_image(image_id)
        if self.session.detail_view() is None:
            self.session.close_detail()
            return None
        dialog = LabDetailDialog(self.session, self)
        dialog.setWindowModality(QtCore.Qt.WindowModality.WindowModal)
        dialog.finished.connect(lambda _result, d=dialog: self._on_detail_closed(d))
        self.detail_dialog = dialog
        dialog.open()
        return dialog

    def _on_detail_closed(self, dialog: LabDetailDialog) -> None:
        if self.detail_dialog is dialog:
            self.detail_dialog = None
        dialog.deleteLater()

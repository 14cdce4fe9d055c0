from typing import Callable, List

from PyQt6 import QtCore

from lab_catalog.errors import CatalogLoadError
from lab_catalog.models import LabImage


class CatalogWorker(QtCore.QObject):
    """Runs one catalog fetch off the UI thread."""

    finished = QtCore.pyqtSignal(object)
    error = QtCore.pyqtSignal(object)

    def __init__(self, fetch: Callable[[], List[LabImage]]):
        super().__init__()
        self._fetch = fetch

    @QtCore.pyqtSlot()
    def run(self):
        try:
            images = self._fetch()
        except CatalogLoadError as exc:
            self.error.emit(exc)
            return
        self.finished.emit(images)

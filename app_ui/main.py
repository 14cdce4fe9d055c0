# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] Session wiring (config -> client/catalog/bridge/dispatcher)
# [NAV-90] MainWindow
# [NAV-99] main() entrypoint
# =============================================================================

# === [NAV-00] Imports / constants ============================================
# region NAV-00 Imports / constants
import sys
from typing import Callable, Optional

from PyQt6 import QtWidgets

from diagnostics.logging_setup import configure_logging, get_logger
from lab_catalog.catalog import LabCatalog
from lab_catalog.dispatch import ClipboardAdapter, ExecutionDispatcher
from lab_catalog.remote import RemoteCatalogClient
from lab_catalog.session import PortalSession

from . import config as portal_config
from . import execution_bridge
from .screens.student_portal import StudentPortalScreen
from .ui_helpers import terms

APP_TITLE = "DockerLab"
# endregion


# === [NAV-10] Session wiring =================================================
# region NAV-10 Session wiring
def _write_clipboard(text: str) -> None:
    clipboard = QtWidgets.QApplication.clipboard()
    if clipboard is not None:
        clipboard.setText(text)


def build_session(
    cfg: portal_config.PortalConfig,
    *,
    on_warning: Callable[[str], None],
    client: Optional[RemoteCatalogClient] = None,
    bridge=None,
    probe_bridge: bool = True,
) -> PortalSession:
    client = client or RemoteCatalogClient(cfg.catalog_url, timeout=cfg.request_timeout_s)
    if bridge is None and probe_bridge:
        bridge = execution_bridge.probe_execution_bridge(cfg.host_execution_enabled)
    dispatcher = ExecutionDispatcher(bridge, on_warning=on_warning)
    session = PortalSession(
        LabCatalog(client.fetch_images),
        dispatcher,
        ClipboardAdapter(_write_clipboard),
        on_warning=on_warning,
    )
    return session
# endregion


# === [NAV-90] MainWindow =====================================================
# region NAV-90 MainWindow
class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, cfg: portal_config.PortalConfig, *, load_on_start: bool = True):
        super().__init__()
        self.setWindowTitle(f"{APP_TITLE} - {terms.PORTAL_TITLE}")
        self.resize(980, 720)
        self.session = build_session(cfg, on_warning=self._show_warning)
        self.portal = StudentPortalScreen(
            self.session,
            load_on_start=load_on_start,
        )
        self.setCentralWidget(self.portal)

    def _show_warning(self, message: str) -> None:
        parent = self.portal.detail_dialog or self
        QtWidgets.QMessageBox.warning(parent, APP_TITLE, message)
# endregion


# === [NAV-99] main() entrypoint =============================================
# region NAV-99 main()
def main():
    log_info = configure_logging()
    cfg = portal_config.load_portal_config()
    get_logger().info("starting portal catalog_url=%s log=%s", cfg.catalog_url, log_info["log_path"])
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(cfg)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
# endregion

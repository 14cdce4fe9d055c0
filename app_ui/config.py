# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] Config loading (defaults/roaming/env)
# [NAV-20] Public getters
# [NAV-99] End
# =============================================================================

# === [NAV-00] Imports / constants ============================================
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from lab_catalog.remote import DEFAULT_CATALOG_URL, DEFAULT_TIMEOUT_S

CONFIG_PATH = Path("data/roaming/portal_config.json")
CATALOG_URL_ENV = "DOCKERLAB_CATALOG_URL"
_DEFAULT_PORTAL_CONFIG = {
    "catalog_url": DEFAULT_CATALOG_URL,
    "request_timeout_s": DEFAULT_TIMEOUT_S,
    "host_execution_enabled": True,
}


@dataclass
class PortalConfig:
    catalog_url: str = DEFAULT_CATALOG_URL
    request_timeout_s: float = DEFAULT_TIMEOUT_S
    host_execution_enabled: bool = True


# === [NAV-10] Config loading (defaults/roaming/env) ==========================
def load_portal_config_data(path: Optional[Path] = None) -> Dict:
    path = path or CONFIG_PATH
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(_DEFAULT_PORTAL_CONFIG, indent=2), encoding="utf-8")
        return _DEFAULT_PORTAL_CONFIG.copy()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return _DEFAULT_PORTAL_CONFIG.copy()
    if not isinstance(data, dict):
        return _DEFAULT_PORTAL_CONFIG.copy()
    for key, value in _DEFAULT_PORTAL_CONFIG.items():
        data.setdefault(key, value)
    return data


def save_portal_config_data(data: Dict, path: Optional[Path] = None) -> None:
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# === [NAV-20] Public getters ==================================================
def load_portal_config(path: Optional[Path] = None) -> PortalConfig:
    data = load_portal_config_data(path)
    url = os.environ.get(CATALOG_URL_ENV) or data.get("catalog_url") or DEFAULT_CATALOG_URL
    try:
        timeout = float(data.get("request_timeout_s", DEFAULT_TIMEOUT_S))
    except (TypeError, ValueError):
        timeout = DEFAULT_TIMEOUT_S
    if timeout <= 0:
        timeout = DEFAULT_TIMEOUT_S
    return PortalConfig(
        catalog_url=str(url),
        request_timeout_s=timeout,
        host_execution_enabled=bool(data.get("host_execution_enabled", True)),
    )


# === [NAV-99] End =============================================================
__all__ = [
    "CONFIG_PATH",
    "CATALOG_URL_ENV",
    "PortalConfig",
    "load_portal_config_data",
    "save_portal_config_data",
    "load_portal_config",
]

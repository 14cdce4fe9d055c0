from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

LOGGER_NAME = "dockerlab"
LOG_FORMAT = "ts=%(asctime)s level=%(levelname)s msg=%(message)s"

_CONFIGURED = False
_HANDLER: Optional[logging.Handler] = None


def _file_handler(log_path: Path) -> logging.Handler:
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure_logging(base_dir: Optional[Path] = None) -> Dict[str, str]:
    global _CONFIGURED, _HANDLER
    root = base_dir or Path("data/roaming")
    log_dir = root / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "dockerlab.log"

    logger_name = LOGGER_NAME if base_dir is None else f"{LOGGER_NAME}.test"
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if base_dir is None and not _CONFIGURED:
        _HANDLER = _file_handler(log_path)
        logger.addHandler(_HANDLER)
        _CONFIGURED = True
    elif base_dir is not None and not logger.handlers:
        logger.addHandler(_file_handler(log_path))

    return {
        "log_path": str(log_path),
        "format": "kv",
        "handlers": "file",
        "logger_name": logger_name,
    }


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .errors import ExecutionUnavailableError, MissingCommandError
from .resolver import is_missing

logger = logging.getLogger("dockerlab.dispatch")

DISPATCHED = "DISPATCHED"
COMMAND_MISSING = "COMMAND_MISSING"
BRIDGE_UNAVAILABLE = "BRIDGE_UNAVAILABLE"

WarningSink = Callable[[str], None]


class ExecutionBridge(Protocol):
    def run_command(self, command: str) -> None: ...


def _log_warning(message: str) -> None:
    logger.warning(message)


class ExecutionDispatcher:
    """One-way handoff of a command string to the host execution bridge.

    The bridge is resolved once by the caller and may be ``None``. Nothing is
    awaited or read back from the bridge; the returned status only says what
    happened locally.
    """

    def __init__(
        self,
        bridge: Optional[ExecutionBridge],
        *,
        on_warning: Optional[WarningSink] = None,
    ) -> None:
        self.bridge = bridge
        self.on_warning = on_warning or _log_warning

    @property
    def available(self) -> bool:
        return self.bridge is not None

    def execute(self, command: Optional[str]) -> str:
        try:
            self._check(command)
        except MissingCommandError as exc:
            self.on_warning(str(exc))
            return COMMAND_MISSING
        except ExecutionUnavailableError as exc:
            logger.warning("execution bridge unavailable, command not dispatched")
            self.on_warning(str(exc))
            return BRIDGE_UNAVAILABLE
        self.bridge.run_command(command)
        logger.info("command dispatched to execution bridge")
        return DISPATCHED

    def _check(self, command: Optional[str]) -> None:
        if is_missing(command):
            raise MissingCommandError()
        if self.bridge is None:
            raise ExecutionUnavailableError()


class ClipboardAdapter:
    def __init__(self, write_text: Callable[[str], None]) -> None:
        self._write_text = write_text

    def copy(self, command: str) -> None:
        self._write_text(command)


__all__ = [
    "BRIDGE_UNAVAILABLE",
    "COMMAND_MISSING",
    "DISPATCHED",
    "ClipboardAdapter",
    "ExecutionBridge",
    "ExecutionDispatcher",
]

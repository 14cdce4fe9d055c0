import logging
import shutil
import subprocess
import sys
from typing import List, Optional

from lab_catalog.dispatch import ExecutionBridge

logger = logging.getLogger("dockerlab.bridge")

DOCKER_EXECUTABLE = "docker"


class ExecutionBridgeNotAvailable(Exception):
    pass


class ShellExecutionBridge:
    """Starts commands in a detached shell. Output is not captured or awaited."""

    def __init__(self) -> None:
        self._launched: List[subprocess.Popen] = []

    def run_command(self, command: str) -> None:
        self._reap()
        kwargs = {
            "shell": True,
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
        }
        if sys.platform == "win32":
            kwargs["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP
        else:
            kwargs["start_new_session"] = True
        try:
            self._launched.append(subprocess.Popen(command, **kwargs))
        except OSError as exc:
            logger.error("failed to start host command: %s", exc)

    def _reap(self) -> None:
        self._launched = [proc for proc in self._launched if proc.poll() is None]


def _check_host(host_execution_enabled: bool) -> None:
    if not host_execution_enabled:
        raise ExecutionBridgeNotAvailable("host execution disabled in portal config")
    if shutil.which(DOCKER_EXECUTABLE) is None:
        raise ExecutionBridgeNotAvailable("docker executable not found on PATH")


def probe_execution_bridge(host_execution_enabled: bool = True) -> Optional[ExecutionBridge]:
    """Resolve the host bridge once per session; ``None`` when the host lacks it."""
    try:
        _check_host(host_execution_enabled)
    except ExecutionBridgeNotAvailable as exc:
        log_bridge_unavailable_once(str(exc))
        return None
    logger.info("execution bridge available")
    return ShellExecutionBridge()


_BRIDGE_UNAVAILABLE_LOGGED = False


def log_bridge_unavailable_once(reason: str) -> None:
    global _BRIDGE_UNAVAILABLE_LOGGED
    if _BRIDGE_UNAVAILABLE_LOGGED:
        return
    _BRIDGE_UNAVAILABLE_LOGGED = True
    logger.warning("execution bridge unavailable: %s", reason)

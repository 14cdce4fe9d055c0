from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import CatalogLoadError

OS_UBUNTU = "ubuntu"
OS_WINDOWS = "windows"
OS_VARIANTS = (OS_UBUNTU, OS_WINDOWS)
DEFAULT_OS = OS_UBUNTU

# attribute name -> wire field name
_WIRE_FIELDS = {
    "subject": "subject",
    "semester": "semester",
    "ubuntu_pull_command": "ubuntuPullCommand",
    "windows_pull_command": "windowsPullCommand",
    "ubuntu_run_command": "ubuntuRunCommand",
    "windows_run_command": "windowsRunCommand",
    "ubuntu_instructions": "ubuntuInstructions",
    "windows_instructions": "windowsInstructions",
    "notes": "notes",
}


@dataclass(frozen=True)
class LabImage:
    """One catalog entry: a container lab and its per-OS setup commands."""

    id: str
    subject: Optional[str] = None
    semester: Optional[str] = None
    ubuntu_pull_command: Optional[str] = None
    windows_pull_command: Optional[str] = None
    ubuntu_run_command: Optional[str] = None
    windows_run_command: Optional[str] = None
    ubuntu_instructions: Optional[str] = None
    windows_instructions: Optional[str] = None
    notes: Optional[str] = None

    @property
    def title(self) -> str:
        return f"{self.semester or ''} - {self.subject or ''}"

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "LabImage":
        if not isinstance(record, dict):
            raise CatalogLoadError(f"catalog entry is not an object: {record!r}")
        image_id = _text(record.get("_id") or record.get("id"))
        if not image_id:
            raise CatalogLoadError("catalog entry without an id")
        values = {attr: _text(record.get(wire)) for attr, wire in _WIRE_FIELDS.items()}
        return cls(id=image_id, **values)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)

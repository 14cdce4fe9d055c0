from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import MissingCommandError
from .models import OS_UBUNTU, LabImage

COMMAND_PULL = "pull"
COMMAND_RUN = "run"


@dataclass(frozen=True)
class ResolvedCommands:
    pull_command: Optional[str]
    run_command: Optional[str]
    instructions: Optional[str]
    notes: Optional[str]

    def command(self, kind: str) -> Optional[str]:
        if kind == COMMAND_PULL:
            return self.pull_command
        if kind == COMMAND_RUN:
            return self.run_command
        raise ValueError(f"unknown command kind: {kind!r}")

    def require(self, kind: str) -> str:
        """Return the pull/run command, raising MissingCommandError when empty."""
        value = self.command(kind)
        if is_missing(value):
            raise MissingCommandError()
        return value


def resolve(image: LabImage, variant: str) -> ResolvedCommands:
    if variant == OS_UBUNTU:
        pull, run, instructions = (
            image.ubuntu_pull_command,
            image.ubuntu_run_command,
            image.ubuntu_instructions,
        )
    else:
        pull, run, instructions = (
            image.windows_pull_command,
            image.windows_run_command,
            image.windows_instructions,
        )
    return ResolvedCommands(
        pull_command=pull,
        run_command=run,
        instructions=instructions or None,
        notes=image.notes or None,
    )


def is_missing(command: Optional[str]) -> bool:
    return not command

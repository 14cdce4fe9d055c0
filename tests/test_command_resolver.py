import pytest

from lab_catalog.errors import MissingCommandError
from lab_catalog.models import OS_UBUNTU, OS_WINDOWS, LabImage
from lab_catalog.resolver import COMMAND_PULL, COMMAND_RUN, resolve


def _full_image() -> LabImage:
    return LabImage(
        "a",
        subject="OS Labs",
        semester="Sem 5",
        ubuntu_pull_command="docker pull os:u",
        windows_pull_command="docker pull os:w",
        ubuntu_run_command="docker run -it os:u",
        windows_run_command="docker run -it os:w",
        ubuntu_instructions="Use sudo.",
        windows_instructions="Start Docker Desktop first.",
        notes="Bring a laptop.",
    )


def test_resolve_selects_fields_by_variant() -> None:
    image = _full_image()
    ubuntu = resolve(image, OS_UBUNTU)
    windows = resolve(image, OS_WINDOWS)
    assert ubuntu.pull_command == "docker pull os:u"
    assert ubuntu.run_command == "docker run -it os:u"
    assert ubuntu.instructions == "Use sudo."
    assert windows.pull_command == "docker pull os:w"
    assert windows.run_command == "docker run -it os:w"
    assert windows.instructions == "Start Docker Desktop first."


def test_notes_do_not_depend_on_variant() -> None:
    image = _full_image()
    assert resolve(image, OS_UBUNTU).notes == "Bring a laptop."
    assert resolve(image, OS_WINDOWS).notes == "Bring a laptop."


def test_instructions_never_fall_back_to_other_os() -> None:
    image = LabImage("a", ubuntu_instructions="only ubuntu", windows_instructions="")
    assert resolve(image, OS_WINDOWS).instructions is None
    assert resolve(image, OS_UBUNTU).instructions == "only ubuntu"


def test_missing_windows_run_command_is_reported_on_require() -> None:
    image = LabImage("a", ubuntu_run_command="docker run u")
    assert resolve(image, OS_UBUNTU).run_command == "docker run u"
    windows = resolve(image, OS_WINDOWS)
    assert windows.run_command is None
    with pytest.raises(MissingCommandError):
        windows.require(COMMAND_RUN)


def test_empty_string_command_counts_as_missing() -> None:
    resolved = resolve(LabImage("a", ubuntu_pull_command=""), OS_UBUNTU)
    with pytest.raises(MissingCommandError):
        resolved.require(COMMAND_PULL)


def test_require_returns_present_command() -> None:
    resolved = resolve(_full_image(), OS_WINDOWS)
    assert resolved.require(COMMAND_PULL) == "docker pull os:w"


def test_unknown_command_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        resolve(_full_image(), OS_UBUNTU).command("build")


def test_resolve_is_deterministic() -> None:
    image = _full_image()
    assert resolve(image, OS_WINDOWS) == resolve(image, OS_WINDOWS)

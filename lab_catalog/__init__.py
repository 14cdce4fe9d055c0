"""Lab image catalog, search, OS-variant selection and command resolution."""

from .catalog import LabCatalog
from .dispatch import (
    BRIDGE_UNAVAILABLE,
    COMMAND_MISSING,
    DISPATCHED,
    ClipboardAdapter,
    ExecutionBridge,
    ExecutionDispatcher,
)
from .errors import (
    CatalogLoadError,
    ExecutionUnavailableError,
    LabCatalogError,
    MissingCommandError,
)
from .models import DEFAULT_OS, OS_UBUNTU, OS_VARIANTS, OS_WINDOWS, LabImage
from .remote import RemoteCatalogClient, parse_catalog
from .resolver import COMMAND_PULL, COMMAND_RUN, ResolvedCommands, resolve
from .search import filter_images
from .selection import SelectionState
from .session import COPIED, DetailView, PortalSession

__all__ = [
    "BRIDGE_UNAVAILABLE",
    "COMMAND_MISSING",
    "COMMAND_PULL",
    "COMMAND_RUN",
    "COPIED",
    "DEFAULT_OS",
    "DISPATCHED",
    "OS_UBUNTU",
    "OS_VARIANTS",
    "OS_WINDOWS",
    "CatalogLoadError",
    "ClipboardAdapter",
    "DetailView",
    "ExecutionBridge",
    "ExecutionDispatcher",
    "ExecutionUnavailableError",
    "LabCatalog",
    "LabCatalogError",
    "LabImage",
    "MissingCommandError",
    "PortalSession",
    "RemoteCatalogClient",
    "ResolvedCommands",
    "SelectionState",
    "filter_images",
    "parse_catalog",
    "resolve",
]

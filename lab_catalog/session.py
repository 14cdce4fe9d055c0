from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .catalog import LabCatalog
from .dispatch import COMMAND_MISSING, ClipboardAdapter, ExecutionDispatcher, WarningSink
from .errors import MissingCommandError
from .models import LabImage
from .resolver import ResolvedCommands, resolve
from .search import filter_images
from .selection import SelectionState

logger = logging.getLogger("dockerlab.session")

COPIED = "COPIED"


@dataclass(frozen=True)
class DetailView:
    image: LabImage
    variant: str
    resolved: ResolvedCommands


class PortalSession:
    """Student portal state for one app session.

    Holds the catalog, the current search text and the selection, and routes
    copy/run actions for the open image to the clipboard and the dispatcher.
    """

    def __init__(
        self,
        catalog: LabCatalog,
        dispatcher: ExecutionDispatcher,
        clipboard: ClipboardAdapter,
        *,
        on_warning: Optional[WarningSink] = None,
    ) -> None:
        self.catalog = catalog
        self.dispatcher = dispatcher
        self.clipboard = clipboard
        self.selection = SelectionState()
        self.query = ""
        self.on_warning: Callable[[str], None] = on_warning or dispatcher.on_warning

    # --- search
    def set_query(self, text: Optional[str]) -> None:
        self.query = text or ""

    def visible_images(self) -> List[LabImage]:
        return filter_images(self.catalog.images, self.query)

    # --- selection
    def open_image(self, image_id: str) -> None:
        self.selection.open(image_id)

    def close_detail(self) -> None:
        self.selection.close()

    def set_variant(self, image_id: str, variant: str) -> None:
        self.selection.set_variant(image_id, variant)

    def variant_for(self, image_id: str) -> str:
        return self.selection.get_variant(image_id)

    def detail_view(self) -> Optional[DetailView]:
        image = self.catalog.get(self.selection.open_image_id)
        if image is None:
            return None
        variant = self.selection.get_variant(image.id)
        return DetailView(image=image, variant=variant, resolved=resolve(image, variant))

    # --- actions on the open image
    def copy_command(self, kind: str) -> str:
        view = self.detail_view()
        try:
            if view is None:
                raise MissingCommandError()
            command = view.resolved.require(kind)
        except MissingCommandError as exc:
            self.on_warning(str(exc))
            return COMMAND_MISSING
        self.clipboard.copy(command)
        logger.info("copied %s command for %s", kind, view.image.id)
        return COPIED

    def run_command(self, kind: str) -> str:
        view = self.detail_view()
        command = view.resolved.command(kind) if view is not None else None
        return self.dispatcher.execute(command)

from __future__ import annotations

from typing import Dict, Optional

from .models import DEFAULT_OS


class SelectionState:
    """Per-image OS variant choices plus the single image open in the detail view."""

    def __init__(self) -> None:
        self.variant_by_image_id: Dict[str, str] = {}
        self.open_image_id: Optional[str] = None

    def set_variant(self, image_id: str, variant: str) -> None:
        self.variant_by_image_id[image_id] = variant

    def get_variant(self, image_id: str) -> str:
        return self.variant_by_image_id.get(image_id, DEFAULT_OS)

    def open(self, image_id: str) -> None:
        self.open_image_id = image_id

    def close(self) -> None:
        self.open_image_id = None

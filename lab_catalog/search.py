from __future__ import annotations

from typing import Iterable, List, Optional

from .models import LabImage


def filter_images(catalog: Iterable[LabImage], query: Optional[str]) -> List[LabImage]:
    """Images whose subject contains ``query`` (case-insensitive), in catalog order."""
    needle = (query or "").casefold()
    if not needle:
        return list(catalog)
    return [image for image in catalog if needle in (image.subject or "").casefold()]

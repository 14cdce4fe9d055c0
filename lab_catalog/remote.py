from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from .errors import CatalogLoadError
from .models import LabImage

logger = logging.getLogger("dockerlab.catalog.remote")

DEFAULT_CATALOG_URL = "http://localhost:5000/api/images"
DEFAULT_TIMEOUT_S = 10.0


class RemoteCatalogClient:
    """Read-only client for the lab image endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_CATALOG_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch_images(self) -> List[LabImage]:
        try:
            resp = self._session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise CatalogLoadError(f"request to {self.url} failed: {exc}") from exc
        try:
            payload = resp.json()
        except ValueError as exc:
            raise CatalogLoadError(f"invalid json from {self.url}") from exc
        images = parse_catalog(payload)
        logger.debug("fetched %d lab images from %s", len(images), self.url)
        return images


def parse_catalog(payload: Any) -> List[LabImage]:
    if not isinstance(payload, list):
        raise CatalogLoadError(f"expected a list of images, got {type(payload).__name__}")
    images: List[LabImage] = []
    seen: set[str] = set()
    for record in payload:
        image = LabImage.from_record(record)
        if image.id in seen:
            raise CatalogLoadError(f"duplicate image id: {image.id}")
        seen.add(image.id)
        images.append(image)
    return images

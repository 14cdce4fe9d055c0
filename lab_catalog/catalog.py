from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import CatalogLoadError
from .models import LabImage

logger = logging.getLogger("dockerlab.catalog")

Fetcher = Callable[[], Sequence[LabImage]]


class LabCatalog:
    """Session catalog. Replaced wholesale on each successful load, never edited.

    ``load()`` is ``fetch()`` followed by ``replace()`` or ``report_failure()``.
    The portal screen runs ``fetch()`` on a worker thread and the other two on
    the UI thread.
    """

    def __init__(self, fetcher: Optional[Fetcher] = None) -> None:
        self._fetcher = fetcher
        self._images: Tuple[LabImage, ...] = ()
        self._by_id: Dict[str, LabImage] = {}
        self._loaded = False
        self.last_error: Optional[CatalogLoadError] = None

    @property
    def images(self) -> Tuple[LabImage, ...]:
        return self._images

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def can_fetch(self) -> bool:
        return self._fetcher is not None

    def get(self, image_id: Optional[str]) -> Optional[LabImage]:
        if image_id is None:
            return None
        return self._by_id.get(image_id)

    def fetch(self) -> List[LabImage]:
        """Call the fetcher without touching catalog state. Safe off the UI thread."""
        if self._fetcher is None:
            raise CatalogLoadError("no catalog fetcher configured")
        try:
            return list(self._fetcher())
        except CatalogLoadError:
            raise
        except Exception as exc:
            raise CatalogLoadError(f"unexpected fetch failure: {exc}") from exc

    def load(self) -> List[LabImage]:
        """Fetch and install a new catalog. Failures keep the previous one."""
        try:
            images = self.fetch()
        except CatalogLoadError as exc:
            self.report_failure(exc)
            raise
        self.replace(images)
        return list(self._images)

    def replace(self, images: Sequence[LabImage]) -> None:
        self._images = tuple(images)
        self._by_id = {image.id: image for image in self._images}
        self._loaded = True
        self.last_error = None
        logger.info("catalog loaded: %d images", len(self._images))

    def report_failure(self, error: CatalogLoadError) -> None:
        self.last_error = error
        logger.error(
            "catalog load failed: %s (keeping %d previous images)",
            error,
            len(self._images),
        )

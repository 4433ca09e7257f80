import random
from pathlib import Path

import structlog

from clubhouse.core.core import Service
from clubhouse.errors import NotFoundError

logger = structlog.get_logger(__name__)

PHOTO_SUFFIXES = {".jpg", ".jpeg", ".png", ".webp"}


class PhotoService(Service):
    """Serves the members-only photo pool from a directory on disk."""

    @property
    def photos_path(self) -> Path:
        return Path(self.core.config.photos_path)

    async def on_start(self) -> None:
        if not self.photos_path.is_dir():
            logger.warning("photos_path_missing", path=str(self.photos_path))
            return
        logger.debug("photo_service_started", photo_count=len(self.list_photos()))

    def list_photos(self) -> list[Path]:
        """List image files in the photos directory, sorted by name."""
        if not self.photos_path.is_dir():
            return []
        return sorted(p for p in self.photos_path.iterdir() if p.is_file() and p.suffix.lower() in PHOTO_SUFFIXES)

    def get_random_photo(self) -> Path:
        photos = self.list_photos()
        if not photos:
            raise NotFoundError("No photos available")
        return random.choice(photos)  # noqa: S311

"""Read-only image metadata catalog."""

from __future__ import annotations

from eventboard.db.store import JSONStore
from eventboard.models.events import ImageMeta


class ImageCatalog:
    def __init__(self, store: JSONStore) -> None:
        self._store = store

    async def list(self) -> list[ImageMeta]:
        return await self._store.list_images()

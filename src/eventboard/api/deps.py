"""Shared API dependency providers."""

from __future__ import annotations

from functools import lru_cache

from eventboard.config import Settings
from eventboard.core.event_manager import EventManager
from eventboard.core.image_catalog import ImageCatalog
from eventboard.db.store import JSONStore


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_store() -> JSONStore:
    # One store per process so every request shares the per-document write locks.
    settings = get_settings()
    return JSONStore(events_path=settings.events_path, images_path=settings.images_path)


def get_event_manager() -> EventManager:
    return EventManager(store=get_store())


def get_image_catalog() -> ImageCatalog:
    return ImageCatalog(store=get_store())

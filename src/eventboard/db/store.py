"""Whole-document JSON persistence for events and images."""

from __future__ import annotations

import asyncio
import copy
import json
import logging
import os
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class StorageError(RuntimeError):
    """A backing document could not be read or written."""


class JSONDocument:
    """A JSON array of objects stored as one UTF-8 file.

    Every load re-reads the file and every save rewrites it in full. Writers
    go through ``transaction()``, which serializes read-modify-write cycles on
    this document.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> list[Record]:
        return await asyncio.to_thread(self._read)

    async def save(self, records: list[Record]) -> None:
        await asyncio.to_thread(self._write, records)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[list[Record]]:
        """Yield the current records and persist them if the block succeeds.

        Nothing is written when the block raises or leaves the records unchanged.
        """
        async with self._lock:
            records = await self.load()
            original = copy.deepcopy(records)
            yield records
            if records != original:
                await self.save(records)

    def _read(self) -> list[Record]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read document {self._path}: {exc}"
            raise StorageError(msg) from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Malformed JSON in {self._path}: {exc}"
            raise StorageError(msg) from exc
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            msg = f"Document {self._path} must be a JSON array of objects"
            raise StorageError(msg)
        return data

    def _write(self, records: list[Record]) -> None:
        payload = json.dumps(records, ensure_ascii=False)
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self._path.name}.")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            msg = f"Cannot write document {self._path}: {exc}"
            raise StorageError(msg) from exc


class JSONStore:
    """Data access layer for the event and image documents."""

    def __init__(self, events_path: Path, images_path: Path) -> None:
        self._events = JSONDocument(events_path)
        self._images = JSONDocument(images_path)

    async def list_events(self) -> list[Record]:
        return await self._events.load()

    async def get_event(self, event_id: str) -> Record | None:
        for record in await self._events.load():
            if record.get("id") == event_id:
                return record
        return None

    async def append_event(self, record: Record) -> None:
        async with self._events.transaction() as records:
            records.append(record)
        logger.info("appended event %s to %s", record.get("id"), self._events.path)

    async def replace_event(self, event_id: str, record: Record) -> bool:
        async with self._events.transaction() as records:
            index = _find_index(records, event_id)
            if index is None:
                return False
            records[index] = record
        logger.info("replaced event %s in %s", event_id, self._events.path)
        return True

    async def delete_event(self, event_id: str) -> bool:
        async with self._events.transaction() as records:
            index = _find_index(records, event_id)
            if index is None:
                return False
            del records[index]
        logger.info("deleted event %s from %s", event_id, self._events.path)
        return True

    async def list_images(self) -> list[Record]:
        return await self._images.load()


def _find_index(records: list[Record], event_id: str) -> int | None:
    for index, record in enumerate(records):
        if record.get("id") == event_id:
            return index
    return None

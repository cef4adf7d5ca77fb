"""Event collection access: listing, lookup and full-replace mutations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from eventboard.core.errors import EventNotFoundError, InvalidEventInputError
from eventboard.core.event_query import query_events
from eventboard.db.store import JSONStore, StorageError
from eventboard.models.events import Event, EventInput, EventSummary, new_event_id

logger = logging.getLogger(__name__)

MISSING_EVENT_MESSAGE = "Event is required"
INVALID_EVENT_MESSAGE = "Invalid data provided."


def parse_event_input(payload: object) -> EventInput:
    """Validate a client payload, raising ``InvalidEventInputError``."""
    if payload is None:
        raise InvalidEventInputError(MISSING_EVENT_MESSAGE)
    if not isinstance(payload, Mapping):
        raise InvalidEventInputError(INVALID_EVENT_MESSAGE)
    try:
        return EventInput.model_validate(dict(payload))
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        logger.debug("rejected event payload, invalid fields: %s", ", ".join(fields))
        raise InvalidEventInputError(INVALID_EVENT_MESSAGE) from exc


class EventManager:
    """Manage the persisted event collection."""

    def __init__(self, store: JSONStore) -> None:
        self._store = store

    async def list(
        self,
        *,
        search: str | None = None,
        limit: int | None = None,
    ) -> list[EventSummary]:
        records = await self._store.list_events()
        return query_events(records, search=search, limit=limit)

    async def get(self, event_id: str) -> Event:
        record = await self._store.get_event(event_id)
        if record is None:
            raise EventNotFoundError(
                event_id, f"For the id {event_id}, no event could be found."
            )
        return _event_from_record(record)

    async def create(self, payload: object) -> Event:
        event_input = parse_event_input(payload)
        event = Event.from_input(new_event_id(), event_input)
        await self._store.append_event(event.model_dump())
        logger.info("created event %s", event.id)
        return event

    async def update(self, event_id: str, payload: object) -> Event:
        event_input = parse_event_input(payload)
        event = Event.from_input(event_id, event_input)
        if not await self._store.replace_event(event_id, event.model_dump()):
            raise EventNotFoundError(event_id)
        logger.info("updated event %s", event_id)
        return event

    async def delete(self, event_id: str) -> None:
        if not await self._store.delete_event(event_id):
            raise EventNotFoundError(event_id)
        logger.info("deleted event %s", event_id)


def _event_from_record(record: dict[str, Any]) -> Event:
    try:
        return Event.model_validate(record)
    except ValidationError as exc:
        msg = f"Stored event {record.get('id')!r} is malformed"
        raise StorageError(msg) from exc

"""Event routes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from eventboard.api.deps import get_event_manager, get_image_catalog
from eventboard.api.schemas.events import (
    EventResponse,
    EventsResponse,
    ImagesResponse,
    MessageResponse,
)
from eventboard.core.errors import EventNotFoundError, InvalidEventInputError
from eventboard.core.event_manager import EventManager
from eventboard.core.image_catalog import ImageCatalog

router = APIRouter(prefix="/events", tags=["events"])


def event_payload(body: Any = Body(default=None)) -> Any:
    """The ``event`` member of a JSON object body, ``None`` for any other body."""
    if isinstance(body, Mapping):
        return body.get("event")
    return None


def list_limit(max_events: str | None = Query(default=None, alias="max")) -> int | None:
    """Parse ``max``; an empty value means no limit."""
    if max_events is None or not max_events.strip():
        return None
    try:
        limit = int(max_events)
    except ValueError:
        limit = -1
    if limit < 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="max must be a non-negative integer",
        )
    return limit


@router.get("", response_model=EventsResponse)
async def list_events(
    search: str | None = None,
    limit: int | None = Depends(list_limit),
    manager: EventManager = Depends(get_event_manager),
) -> EventsResponse:
    return EventsResponse(events=await manager.list(search=search, limit=limit))


@router.get("/images", response_model=ImagesResponse)
async def list_images(catalog: ImageCatalog = Depends(get_image_catalog)) -> ImagesResponse:
    return ImagesResponse(images=await catalog.list())


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    manager: EventManager = Depends(get_event_manager),
) -> EventResponse:
    try:
        event = await manager.get(event_id)
    except EventNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return EventResponse(event=event)


@router.post("", response_model=EventResponse)
async def create_event(
    payload: Any = Depends(event_payload),
    manager: EventManager = Depends(get_event_manager),
) -> EventResponse:
    try:
        event = await manager.create(payload)
    except InvalidEventInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return EventResponse(event=event)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    payload: Any = Depends(event_payload),
    manager: EventManager = Depends(get_event_manager),
) -> EventResponse:
    try:
        event = await manager.update(event_id, payload)
    except InvalidEventInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except EventNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return EventResponse(event=event)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    manager: EventManager = Depends(get_event_manager),
) -> MessageResponse:
    try:
        await manager.delete(event_id)
    except EventNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Event deleted")

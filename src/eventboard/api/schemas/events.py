"""Event API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from eventboard.models.events import Event, EventSummary, ImageMeta


class EventResponse(BaseModel):
    event: Event


class EventsResponse(BaseModel):
    """Summaries of the matching events."""

    events: list[EventSummary]


class ImagesResponse(BaseModel):
    images: list[ImageMeta]


class MessageResponse(BaseModel):
    message: str

"""Event domain models."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_EVENT_FIELDS = ("title", "description", "date", "time", "image", "location")
SUMMARY_FIELDS = ("id", "title", "image", "date", "location")

ImageMeta = dict[str, Any]


def new_event_id() -> str:
    return str(uuid4())


class EventInput(BaseModel):
    """Client-supplied event fields; unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow", strict=True)

    title: str
    description: str
    date: str
    time: str
    image: str
    location: str

    @field_validator(*REQUIRED_EVENT_FIELDS)
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value

    def fields(self) -> dict[str, Any]:
        """Input payload without any client-provided id."""
        payload = self.model_dump()
        payload.pop("id", None)
        return payload


class Event(BaseModel):
    """Stored event record."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(default_factory=new_event_id)
    title: str
    description: str
    date: str
    time: str
    image: str
    location: str

    @classmethod
    def from_input(cls, event_id: str, payload: EventInput) -> Event:
        return cls.model_validate({"id": event_id, **payload.fields()})


class EventSummary(BaseModel):
    """List view of an event; values are projected from storage as-is."""

    id: Any = None
    title: Any = None
    image: Any = None
    date: Any = None
    location: Any = None

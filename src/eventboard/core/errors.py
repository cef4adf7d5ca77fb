"""Domain errors raised by the event managers."""

from __future__ import annotations


class InvalidEventInputError(ValueError):
    """Event payload is missing or has a blank required field."""


class EventNotFoundError(LookupError):
    """No event exists with the requested id."""

    def __init__(self, event_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Event not found: {event_id}")
        self.event_id = event_id

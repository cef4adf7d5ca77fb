"""Search, trailing-N limit and summary projection over raw event records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from eventboard.models.events import SUMMARY_FIELDS, EventSummary

T = TypeVar("T")

SEARCHABLE_FIELDS = ("title", "description", "location")


def searchable_text(record: dict[str, Any]) -> str:
    return " ".join(str(record.get(field) or "") for field in SEARCHABLE_FIELDS)


def matches_search(record: dict[str, Any], search: str) -> bool:
    """Case-insensitive substring match over title, description and location."""
    return search.lower() in searchable_text(record).lower()


def take_last(items: Sequence[T], limit: int | None) -> list[T]:
    """Keep the last ``limit`` items in their original order."""
    if limit is None:
        return list(items)
    if limit < 0:
        msg = "limit must not be negative"
        raise ValueError(msg)
    if limit == 0:
        return []
    return list(items[-limit:])


def summarize(record: dict[str, Any]) -> EventSummary:
    return EventSummary.model_validate({field: record.get(field) for field in SUMMARY_FIELDS})


def query_events(
    records: Sequence[dict[str, Any]],
    *,
    search: str | None = None,
    limit: int | None = None,
) -> list[EventSummary]:
    filtered = records
    if search:
        filtered = [record for record in records if matches_search(record, search)]
    return [summarize(record) for record in take_last(filtered, limit)]

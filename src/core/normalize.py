"""
Event normalization and the multi-day visibility filter.
"""

import math
from datetime import date, datetime, timedelta

from core.config import MIN_VISIBLE_DAYS
from models.events import CalendarEvent, EventCandidate

DAY = timedelta(days=1)


def to_day(value: date | datetime) -> date:
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def duration_days(start: date, end: date) -> int:
    """Whole days between start and an exclusive end, rounded up."""
    return math.ceil((end - start) / DAY)


def is_visible(event: CalendarEvent) -> bool:
    """Only events lasting longer than a day are shown."""
    return event.duration_days > MIN_VISIBLE_DAYS


def normalize_event(
    candidate: EventCandidate, event_id: str, source_id: str
) -> CalendarEvent | None:
    """
    Build a CalendarEvent from a parsed candidate.

    A start equal to the end is a single all-day event and gets one day
    added to make the end exclusive. Returns None when a date is missing or
    the end falls before the start.
    """
    if not candidate.get("start") or not candidate.get("end"):
        return None

    start = to_day(candidate["start"])
    end = to_day(candidate["end"])
    if end == start:
        end = start + DAY
    if end < start:
        return None

    return CalendarEvent(
        id=event_id,
        source_id=source_id,
        title=candidate.get("title") or "",
        start=start,
        end=end,
        duration_days=duration_days(start, end),
        color=None,
    )


def normalize_events(candidates: list[EventCandidate], source_id: str = "") -> list[CalendarEvent]:
    """Normalize parsed candidates and keep only the multi-day ones."""
    events = []
    for index, candidate in enumerate(candidates):
        event = normalize_event(candidate, f"{source_id}-{index}", source_id)
        if event is not None and is_visible(event):
            events.append(event)
    return events

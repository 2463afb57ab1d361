"""
Month clipping and per-week slicing of events.
"""

import calendar
from datetime import date, timedelta

from core.config import EVENT_COLORS, FIRST_WEEKDAY
from models.events import CalendarEvent, Segment

DAY = timedelta(days=1)


def weekday_offset(day: date, first_weekday: int = FIRST_WEEKDAY) -> int:
    """Column index (0..6) of a day in a week starting on first_weekday."""
    return (day.weekday() - first_weekday) % 7


def month_bounds(year: int, month: int) -> tuple[date, date, int]:
    """Return (first day, last day, days in month). `month` is 1..12."""
    days_in_month = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, days_in_month), days_in_month


def row_count(year: int, month: int, first_weekday: int = FIRST_WEEKDAY) -> int:
    """Number of week rows needed to show the month."""
    month_start, _, days_in_month = month_bounds(year, month)
    offset = weekday_offset(month_start, first_weekday)
    return -(-(days_in_month + offset) // 7)


def event_color(event: CalendarEvent, index: int) -> str:
    """Event's own color, else a palette pick from title length and list position."""
    if event.color:
        return event.color
    return EVENT_COLORS[(len(event.title) + index) % len(EVENT_COLORS)]


def classify_rounding(is_true_start: bool, is_true_end: bool) -> str:
    if is_true_start and is_true_end:
        return "full"
    if is_true_start:
        return "left"
    if is_true_end:
        return "right"
    return "none"


def slice_event(
    event: CalendarEvent,
    index: int,
    year: int,
    month: int,
    first_weekday: int = FIRST_WEEKDAY,
) -> list[Segment]:
    """
    Clip one event to the month and cut it at week boundaries.

    The clipped range includes the event's end day, as the grid shows it.
    True start/end are judged against the unclipped event, so a slice that
    touches the month edge is still a continuation.
    """
    month_start, month_end, _ = month_bounds(year, month)
    if event.end < month_start or event.start > month_end:
        return []

    display_start = max(event.start, month_start)
    display_end = min(event.end, month_end)
    first_offset = weekday_offset(month_start, first_weekday)
    rows = row_count(year, month, first_weekday)
    title = event.title or "Untitled"
    color = event_color(event, index)

    segments = []
    current = display_start
    while current <= display_end:
        days_until_week_end = 6 - weekday_offset(current, first_weekday)
        segment_end = min(current + timedelta(days=days_until_week_end), display_end)

        start_slot = first_offset + current.day - 1
        end_slot = first_offset + segment_end.day - 1
        row_index = start_slot // 7

        is_true_start = current == event.start
        is_true_end = segment_end >= event.end - DAY

        if row_index < rows:
            segments.append(
                Segment(
                    event_id=event.id or f"{title}-{index}-{start_slot}",
                    title=title,
                    row_index=row_index,
                    col_start=start_slot % 7 + 1,
                    col_end=end_slot % 7 + 2,
                    is_continuation_start=not is_true_start,
                    is_continuation_end=not is_true_end,
                    rounding=classify_rounding(is_true_start, is_true_end),
                    color=color,
                )
            )

        current = segment_end + DAY

    return segments


def segment_month(
    year: int,
    month: int,
    events: list[CalendarEvent] | tuple[CalendarEvent, ...],
    first_weekday: int = FIRST_WEEKDAY,
) -> list[list[Segment]]:
    """Segments of every event overlapping the month, grouped by week row."""
    segments_by_row: list[list[Segment]] = [[] for _ in range(row_count(year, month, first_weekday))]
    for index, event in enumerate(events):
        for segment in slice_event(event, index, year, month, first_weekday):
            segments_by_row[segment.row_index].append(segment)
    return segments_by_row

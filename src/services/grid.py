"""
Month and year grid assembly.

Pure functions of (events, year, month, first weekday); `cached_month_layout`
adds memoization on top without changing results.
"""

from datetime import date
from functools import lru_cache

from core.config import FIRST_WEEKDAY, MONTH_NAMES
from core.lanes import assign_lanes, row_height
from core.segments import month_bounds, segment_month, weekday_offset
from models.events import CalendarEvent, MonthLayout, RowLayout

VIEW_CALENDAR = "calendar"
VIEW_ROLLING = "rolling"
VIEW_MODES = (VIEW_CALENDAR, VIEW_ROLLING)


def day_numbers(year: int, month: int, row_index: int, first_weekday: int = FIRST_WEEKDAY):
    """Day of month shown in each of the row's seven columns, None for padding."""
    month_start, _, days_in_month = month_bounds(year, month)
    offset = weekday_offset(month_start, first_weekday)
    cells = []
    for col in range(1, 8):
        day = row_index * 7 + col - offset
        cells.append(day if 0 < day <= days_in_month else None)
    return tuple(cells)


def build_month(
    year: int,
    month: int,
    events: list[CalendarEvent] | tuple[CalendarEvent, ...],
    first_weekday: int = FIRST_WEEKDAY,
) -> MonthLayout:
    """Segment and stack every event overlapping the month."""
    rows = []
    for row_index, segments in enumerate(segment_month(year, month, events, first_weekday)):
        assignments, lane_count = assign_lanes(segments)
        rows.append(
            RowLayout(
                row_index=row_index,
                day_numbers=day_numbers(year, month, row_index, first_weekday),
                lane_assignments=tuple(assignments),
                lane_count=lane_count,
                height=row_height(lane_count),
            )
        )

    return MonthLayout(
        year=year,
        month=month,
        name=MONTH_NAMES[month - 1],
        row_count=len(rows),
        rows=tuple(rows),
    )


@lru_cache(maxsize=256)
def cached_month_layout(
    year: int,
    month: int,
    events: tuple[CalendarEvent, ...],
    first_weekday: int = FIRST_WEEKDAY,
) -> MonthLayout:
    return build_month(year, month, events, first_weekday)


# =============================================================================
# MONTH SELECTION
# =============================================================================


def calendar_year_months(year: int) -> list[tuple[int, int]]:
    """January through December of one year."""
    return [(year, month) for month in range(1, 13)]


def rolling_months(start_year: int, start_month: int) -> list[tuple[int, int]]:
    """Twelve consecutive months from start_month, wrapping into the next year."""
    months = []
    for index in range(12):
        month_index = start_month - 1 + index
        months.append((start_year + month_index // 12, month_index % 12 + 1))
    return months


def months_for_view(view_mode: str, selected_year: int, today: date | None = None) -> list[tuple[int, int]]:
    """
    The twelve (year, month) pairs a view shows.

    Rolling view starts at today's month within the selected year.
    """
    if view_mode == VIEW_ROLLING:
        today = today or date.today()
        return rolling_months(selected_year, today.month)
    return calendar_year_months(selected_year)


def build_year(
    events: list[CalendarEvent] | tuple[CalendarEvent, ...],
    selected_year: int,
    view_mode: str = VIEW_CALENDAR,
    today: date | None = None,
    first_weekday: int = FIRST_WEEKDAY,
    use_cache: bool = True,
) -> list[MonthLayout]:
    """Lay out all twelve months of a view."""
    events = tuple(events)
    layouts = []
    for year, month in months_for_view(view_mode, selected_year, today):
        if use_cache:
            layouts.append(cached_month_layout(year, month, events, first_weekday))
        else:
            layouts.append(build_month(year, month, events, first_weekday))
    return layouts

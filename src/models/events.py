"""
Data models for calendar events, sources and layout results.

Parser output uses TypedDict; everything handed to layout is a frozen
dataclass so results can be hashed, cached and shared safely.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import TypedDict


class EventCandidate(TypedDict, total=False):
    """Raw VEVENT block as read by the parser, before normalization."""
    title: str
    start: date | None
    end: date | None


@dataclass(frozen=True)
class CalendarEvent:
    """Normalized multi-day event. `end` is exclusive."""

    id: str
    source_id: str
    title: str
    start: date
    end: date
    duration_days: int
    color: str | None = None


@dataclass(frozen=True)
class Source:
    """Origin of a batch of events ("file", "url" or "mock")."""

    id: str
    name: str
    type: str


@dataclass(frozen=True)
class Segment:
    """Slice of one event within a single week row of a month grid."""

    event_id: str
    title: str
    row_index: int
    col_start: int  # 1..7, inclusive
    col_end: int  # 2..8, exclusive
    is_continuation_start: bool
    is_continuation_end: bool
    rounding: str  # "full", "left", "right" or "none"
    color: str

    @property
    def span(self) -> int:
        return self.col_end - self.col_start


@dataclass(frozen=True)
class LaneAssignment:
    """Segment placed on a horizontal lane of its week row."""

    segment: Segment
    lane_index: int
    top: float


@dataclass(frozen=True)
class RowLayout:
    """One week row: day-number cells plus stacked segments."""

    row_index: int
    day_numbers: tuple[int | None, ...]
    lane_assignments: tuple[LaneAssignment, ...]
    lane_count: int
    height: float


@dataclass(frozen=True)
class MonthLayout:
    """Renderable model for one (year, month) grid. `month` is 1..12."""

    year: int
    month: int
    name: str
    row_count: int
    rows: tuple[RowLayout, ...]


@dataclass(frozen=True)
class AppState:
    """Snapshot of loaded calendars and view selection."""

    events: tuple[CalendarEvent, ...] = ()
    sources: tuple[Source, ...] = ()
    view_mode: str = "calendar"
    selected_year: int = field(default_factory=lambda: date.today().year)

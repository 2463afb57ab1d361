"""
Application state operations.

Every operation takes an AppState and returns a new one; nothing is
mutated in place. Sources and their events are replaced wholesale.
"""

from dataclasses import replace
from datetime import date

from core.config import MOCK_SOURCE_ID
from models.events import AppState, CalendarEvent, Source
from services.grid import VIEW_CALENDAR, VIEW_ROLLING
from services.mock import generate_mock_events, mock_source


def initial_state(today: date | None = None) -> AppState:
    """Current year, calendar view, sample data loaded."""
    year = (today or date.today()).year
    return AppState(
        events=tuple(generate_mock_events(year)),
        sources=(mock_source(),),
        view_mode=VIEW_CALENDAR,
        selected_year=year,
    )


def add_source(state: AppState, source: Source, events: list[CalendarEvent]) -> AppState:
    """Add a source and its events, dropping the sample data if present."""
    kept_events = tuple(e for e in state.events if e.source_id != MOCK_SOURCE_ID)
    kept_sources = tuple(s for s in state.sources if s.id != MOCK_SOURCE_ID)
    tagged = tuple(replace(e, source_id=source.id) for e in events)
    return replace(
        state,
        events=kept_events + tagged,
        sources=kept_sources + (source,),
    )


def remove_source(state: AppState, source_id: str) -> AppState:
    """Remove a source together with every event it owns."""
    return replace(
        state,
        events=tuple(e for e in state.events if e.source_id != source_id),
        sources=tuple(s for s in state.sources if s.id != source_id),
    )


def clear_all(state: AppState) -> AppState:
    return replace(state, events=(), sources=())


def set_year(state: AppState, year: int) -> AppState:
    return replace(state, selected_year=year)


def toggle_view_mode(state: AppState) -> AppState:
    """Switch between calendar-year and rolling twelve-month views."""
    view_mode = VIEW_CALENDAR if state.view_mode == VIEW_ROLLING else VIEW_ROLLING
    return replace(state, view_mode=view_mode)

"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest
import requests

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.normalize import duration_days  # noqa: E402
from models.events import CalendarEvent, Segment  # noqa: E402


TRIP_ICS = "\r\n".join(
    [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Test//Yearly Planner//EN",
        "BEGIN:VEVENT",
        "UID:trip-1@example.com",
        "SUMMARY:Trip",
        "DTSTART;VALUE=DATE:20240701",
        "DTEND;VALUE=DATE:20240706",
        "LOCATION:Lisbon",
        "END:VEVENT",
        "BEGIN:VEVENT",
        "UID:lunch-1@example.com",
        "SUMMARY:Lunch",
        "DTSTART:20240702T120000Z",
        "DTEND:20240702T130000Z",
        "END:VEVENT",
        "END:VCALENDAR",
        "",
    ]
)


@pytest.fixture
def trip_ics():
    """Calendar text with one multi-day trip and one short meeting."""
    return TRIP_ICS


@pytest.fixture
def make_event():
    """Factory for normalized events."""

    def _make(title, start, end, event_id=None, source_id="test", color=None):
        return CalendarEvent(
            id=event_id or f"{source_id}-{title}",
            source_id=source_id,
            title=title,
            start=start,
            end=end,
            duration_days=duration_days(start, end),
            color=color,
        )

    return _make


@pytest.fixture
def make_segment():
    """Factory for bare segments on row 0."""

    def _make(col_start, col_end, title=None):
        return Segment(
            event_id=title or f"seg-{col_start}-{col_end}",
            title=title or f"seg-{col_start}-{col_end}",
            row_index=0,
            col_start=col_start,
            col_end=col_end,
            is_continuation_start=False,
            is_continuation_end=False,
            rounding="full",
            color="blue",
        )

    return _make


@pytest.fixture
def sample_events(make_event):
    """Overlapping events in May 2024."""
    return [
        make_event("Project Sprint", date(2024, 5, 1), date(2024, 5, 15)),
        make_event("Overlap Test A", date(2024, 5, 5), date(2024, 5, 10)),
        make_event("Overlap Test B", date(2024, 5, 8), date(2024, 5, 12)),
    ]


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; returns a dict to configure the next response."""
    calls = {"response": FakeResponse(TRIP_ICS), "error": None, "urls": [], "headers": []}

    def _get(url, headers=None, timeout=None):
        calls["urls"].append(url)
        calls["headers"].append(headers or {})
        if calls["error"] is not None:
            raise calls["error"]
        return calls["response"]

    monkeypatch.setattr(requests, "get", _get)
    return calls


@pytest.fixture
def fake_response():
    return FakeResponse

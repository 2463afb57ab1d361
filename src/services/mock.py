"""
Sample events shown before any real calendar is loaded.
"""

from datetime import date

from core.config import MOCK_SOURCE_ID, MOCK_SOURCE_NAME
from core.normalize import duration_days
from models.events import CalendarEvent, Source

# (title, (start month, day), (end month, day), color)
MOCK_EVENTS = [
    ("Winter Vacation", (1, 5), (1, 12), "blue"),
    ("Conference in NY", (3, 10), (3, 14), "purple"),
    ("Project Sprint", (5, 1), (5, 15), "green"),
    ("Summer Roadtrip", (7, 20), (8, 5), "orange"),
    ("Design Workshop", (9, 12), (9, 14), "indigo"),
    ("Holiday Break", (12, 24), (12, 31), "red"),
    # Intentional overlap within Project Sprint
    ("Overlap Test A", (5, 5), (5, 10), "rose"),
    ("Overlap Test B", (5, 8), (5, 12), "yellow"),
]


def mock_source() -> Source:
    return Source(id=MOCK_SOURCE_ID, name=MOCK_SOURCE_NAME, type="mock")


def generate_mock_events(year: int) -> list[CalendarEvent]:
    """Build the sample events for a year, bypassing the parser."""
    events = []
    for number, (title, (start_month, start_day), (end_month, end_day), color) in enumerate(
        MOCK_EVENTS, start=1
    ):
        start = date(year, start_month, start_day)
        end = date(year, end_month, end_day)
        events.append(
            CalendarEvent(
                id=f"mock-{number}",
                source_id=MOCK_SOURCE_ID,
                title=title,
                start=start,
                end=end,
                duration_days=duration_days(start, end),
                color=color,
            )
        )
    return events

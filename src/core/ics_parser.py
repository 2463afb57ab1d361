"""
Tolerant line-oriented reader for VEVENT blocks in iCalendar text.

Only SUMMARY, DTSTART and DTEND are consumed; every other property,
including recurrence rules and time zones, is ignored. Dates are read as
whole days from the first eight characters (YYYYMMDD) of the value.
"""

import re
from datetime import date

from core.config import UNTITLED_EVENT
from models.events import EventCandidate

BEGIN_EVENT = "BEGIN:VEVENT"
END_EVENT = "END:VEVENT"

# Checked in order; the VALUE=DATE forms must come before the bare ones.
PROPERTY_PREFIXES: tuple[tuple[str, str], ...] = (
    ("SUMMARY:", "title"),
    ("DTSTART;VALUE=DATE:", "start"),
    ("DTSTART:", "start"),
    ("DTEND;VALUE=DATE:", "end"),
    ("DTEND:", "end"),
)

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def parse_ics_date(value: str) -> date | None:
    """Parse the leading YYYYMMDD of a date token, ignoring anything after it."""
    token = value[:8]
    year, month, day = token[0:4], token[4:6], token[6:8]
    if not (year.isdigit() and month.isdigit() and day.isdigit()):
        return None
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def tokenize_line(line: str) -> tuple[str, str] | None:
    """Map a property line to (field, raw value), or None if not recognized."""
    for prefix, field in PROPERTY_PREFIXES:
        if line.startswith(prefix):
            return field, line[len(prefix):]
    return None


def _store_title(record: EventCandidate, value: str):
    record["title"] = value


def _store_start(record: EventCandidate, value: str):
    record["start"] = parse_ics_date(value)


def _store_end(record: EventCandidate, value: str):
    record["end"] = parse_ics_date(value)


FIELD_HANDLERS = {
    "title": _store_title,
    "start": _store_start,
    "end": _store_end,
}


def parse_ics(content: str) -> list[EventCandidate]:
    """
    Extract event candidates from calendar text.

    Never raises. Blocks left open at end of input are dropped, and so are
    candidates missing a start or end date. Blocks without a SUMMARY get
    the "Untitled Event" title.
    """
    candidates: list[EventCandidate] = []
    current: EventCandidate | None = None

    for raw_line in _LINE_BREAK.split(content or ""):
        line = raw_line.strip()
        if line.startswith(BEGIN_EVENT):
            current = {}
        elif line.startswith(END_EVENT):
            if current is not None:
                if not current.get("title"):
                    current["title"] = UNTITLED_EVENT
                candidates.append(current)
            current = None
        elif current is not None:
            token = tokenize_line(line)
            if token:
                field, value = token
                FIELD_HANDLERS[field](current, value)

    return [c for c in candidates if c.get("start") and c.get("end")]

"""
Calendar acquisition (file, URL) and ingestion into application state.

Acquisition either yields the complete text or raises AcquisitionError;
the parser only ever sees complete text. Each failure is reported once,
named after its source, and leaves the state untouched.
"""

import uuid
from pathlib import Path
from urllib.parse import urlparse

import requests

from core.config import FETCH_TIMEOUT_SECONDS, FETCH_USER_AGENT, ICS_EXTENSION, REMOTE_CALENDAR_NAME
from core.ics_parser import parse_ics
from core.normalize import normalize_events
from models.events import AppState, CalendarEvent, Source
from services.state import add_source


class SourceError(Exception):
    """A calendar source could not be loaded."""

    def __init__(self, source_name: str, message: str):
        super().__init__(message)
        self.source_name = source_name


class AcquisitionError(SourceError):
    """The source text could not be obtained."""


class SourceParseError(SourceError):
    """The source text was obtained but produced no usable events."""


CORS_HINT = (
    "Note: Many calendar providers (like Google) block direct browser access via CORS. "
    "You may need to download the file manually."
)


def new_source_id() -> str:
    return uuid.uuid4().hex


def source_name_for_url(url: str) -> str:
    """Display name for a remote calendar: host plus path."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return REMOTE_CALENDAR_NAME
    if not parsed.hostname:
        return REMOTE_CALENDAR_NAME
    path = parsed.path if len(parsed.path) > 1 else ""
    return parsed.hostname + path


# =============================================================================
# ACQUISITION
# =============================================================================


def read_ics_file(path: Path | str) -> str:
    """Read a local .ics file as UTF-8 text."""
    path = Path(path)
    if not path.name.endswith(ICS_EXTENSION):
        raise AcquisitionError(path.name, f"Skipping {path.name}: Not an {ICS_EXTENSION} file")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AcquisitionError(path.name, f"Could not read {path.name}: {e}") from e


def fetch_text(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> str:
    """
    GET a URL and return the body as text.

    Raises requests exceptions unchanged, including HTTPError for non-2xx.
    """
    response = requests.get(url, headers={"User-Agent": FETCH_USER_AGENT}, timeout=timeout)
    response.raise_for_status()
    return response.text


def fetch_ics(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> str:
    """Download a remote calendar, wrapping any failure in AcquisitionError."""
    name = source_name_for_url(url)
    print(f"Fetching {url}...")
    try:
        return fetch_text(url, timeout)
    except requests.RequestException as e:
        print(f"  Error fetching URL: {e}")
        raise AcquisitionError(name, f"Could not load {name}. {CORS_HINT}") from e


# =============================================================================
# INGESTION
# =============================================================================


def process_ics_text(
    content: str, source_name: str, source_type: str
) -> tuple[Source, list[CalendarEvent]]:
    """Parse and normalize one source's text into a new Source and its events."""
    source = Source(id=new_source_id(), name=source_name, type=source_type)
    try:
        events = normalize_events(parse_ics(content), source.id)
    except Exception as e:
        raise SourceParseError(source_name, f"Error parsing {source_name}.") from e

    if not events:
        raise SourceParseError(source_name, f"Error parsing {source_name}: no multi-day events found.")

    print(f"  Loaded {len(events)} events from {source_name}")
    return source, events


def ingest_text(state: AppState, content: str, source_name: str, source_type: str) -> AppState:
    source, events = process_ics_text(content, source_name, source_type)
    return add_source(state, source, events)


def ingest_file(state: AppState, path: Path | str) -> AppState:
    """Load a local .ics file as a new source."""
    path = Path(path)
    return ingest_text(state, read_ics_file(path), path.name, "file")


def ingest_url(state: AppState, url: str) -> AppState:
    """Load a remote calendar as a new source."""
    return ingest_text(state, fetch_ics(url), source_name_for_url(url), "url")


def ingest_all(state: AppState, locations: list[str]) -> tuple[AppState, list[SourceError]]:
    """
    Load several files or URLs; failed sources are collected, not raised.

    A failing source never affects the ones loaded before or after it.
    """
    errors = []
    for location in locations:
        try:
            if location.startswith(("http://", "https://")):
                state = ingest_url(state, location)
            else:
                state = ingest_file(state, location)
        except SourceError as e:
            errors.append(e)
    return state, errors

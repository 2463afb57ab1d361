"""Tests for the VEVENT text parser."""

from datetime import date

import pytest

from core.ics_parser import parse_ics, parse_ics_date, tokenize_line
from fixtures.generate_events import generate_ics


def block(*lines):
    return "\n".join(["BEGIN:VEVENT", *lines, "END:VEVENT"])


def test_parses_all_day_event(trip_ics):
    events = parse_ics(trip_ics)

    assert events[0] == {"title": "Trip", "start": date(2024, 7, 1), "end": date(2024, 7, 6)}


def test_timed_event_keeps_only_the_day(trip_ics):
    lunch = parse_ics(trip_ics)[1]

    assert lunch["start"] == date(2024, 7, 2)
    assert lunch["end"] == date(2024, 7, 2)


def test_missing_summary_gets_untitled():
    events = parse_ics(block("DTSTART:20240301", "DTEND:20240305"))

    assert events[0]["title"] == "Untitled Event"


def test_empty_summary_gets_untitled():
    events = parse_ics(block("SUMMARY:", "DTSTART:20240301", "DTEND:20240305"))

    assert events[0]["title"] == "Untitled Event"


def test_missing_end_is_dropped():
    assert parse_ics(block("SUMMARY:Half", "DTSTART;VALUE=DATE:20240301")) == []


def test_unparseable_date_is_dropped():
    text = block("SUMMARY:Bad", "DTSTART;VALUE=DATE:2024AB01", "DTEND;VALUE=DATE:20240305")

    assert parse_ics(text) == []


def test_unterminated_block_is_dropped():
    text = "\n".join(
        [
            block("SUMMARY:Closed", "DTSTART:20240301", "DTEND:20240305"),
            "BEGIN:VEVENT",
            "SUMMARY:Open",
            "DTSTART:20240401",
            "DTEND:20240405",
        ]
    )

    assert [e["title"] for e in parse_ics(text)] == ["Closed"]


def test_properties_outside_blocks_are_ignored():
    text = "\n".join(
        [
            "SUMMARY:Stray",
            "DTSTART:20240101",
            block("DTSTART:20240301", "DTEND:20240305"),
            "DTEND:20240110",
        ]
    )

    events = parse_ics(text)

    assert len(events) == 1
    assert events[0]["title"] == "Untitled Event"


def test_tzid_start_is_not_recognized():
    text = block("SUMMARY:Zoned", "DTSTART;TZID=Europe/Berlin:20240301T090000", "DTEND:20240305")

    assert parse_ics(text) == []


@pytest.mark.parametrize("line_ending", ["\r\n", "\n", "\r"])
def test_line_endings(line_ending):
    text = line_ending.join(["BEGIN:VEVENT", "SUMMARY:Trip", "DTSTART:20240701", "DTEND:20240706", "END:VEVENT"])

    assert len(parse_ics(text)) == 1


def test_indented_lines_are_stripped():
    text = "  BEGIN:VEVENT\n   SUMMARY:Trip  \n DTSTART:20240701\n DTEND:20240706\n END:VEVENT"

    assert parse_ics(text)[0]["title"] == "Trip"


def test_no_events():
    assert parse_ics("") == []
    assert parse_ics(None) == []
    assert parse_ics("BEGIN:VCALENDAR\nEND:VCALENDAR") == []
    assert parse_ics("not a calendar at all") == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("20240701", date(2024, 7, 1)),
        ("20240701T093000Z", date(2024, 7, 1)),
        ("20240229", date(2024, 2, 29)),
        ("20231301", None),
        ("20230229", None),
        ("2024", None),
        ("", None),
        ("abcdefgh", None),
    ],
)
def test_parse_ics_date(value, expected):
    assert parse_ics_date(value) == expected


def test_date_form_prefix_takes_precedence():
    assert tokenize_line("DTSTART;VALUE=DATE:20240701") == ("start", "20240701")
    assert tokenize_line("DTEND:20240706T000000") == ("end", "20240706T000000")
    assert tokenize_line("SUMMARY:A: B") == ("title", "A: B")
    assert tokenize_line("LOCATION:Lisbon") is None


@pytest.mark.parametrize("seed", range(10))
def test_random_calendars_never_raise(seed):
    events = parse_ics(generate_ics(seed))

    for event in events:
        assert event["title"]
        assert isinstance(event["start"], date)
        assert isinstance(event["end"], date)

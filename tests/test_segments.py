"""Tests for month clipping and week slicing."""

import calendar
from dataclasses import replace
from datetime import date

import pytest

from core.config import EVENT_COLORS
from core.segments import (
    classify_rounding,
    event_color,
    month_bounds,
    row_count,
    segment_month,
    slice_event,
    weekday_offset,
)

SUNDAY = calendar.SUNDAY
MONDAY = calendar.MONDAY


def spans(segments):
    return [(s.row_index, s.col_start, s.col_end, s.rounding) for s in segments]


def test_weekday_offset():
    assert weekday_offset(date(2024, 7, 7), SUNDAY) == 0
    assert weekday_offset(date(2024, 7, 6), SUNDAY) == 6
    assert weekday_offset(date(2024, 7, 1), MONDAY) == 0
    assert weekday_offset(date(2024, 7, 7), MONDAY) == 6


def test_month_bounds():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29), 29)
    assert month_bounds(2023, 12) == (date(2023, 12, 1), date(2023, 12, 31), 31)


@pytest.mark.parametrize(
    ("year", "month", "first_weekday", "expected"),
    [
        (2015, 2, SUNDAY, 4),  # starts on Sunday, 28 days
        (2024, 6, SUNDAY, 6),  # starts on Saturday, 30 days
        (2024, 7, SUNDAY, 5),
        (2024, 7, MONDAY, 5),
        (2024, 9, MONDAY, 6),  # starts on Sunday
    ],
)
def test_row_count(year, month, first_weekday, expected):
    assert row_count(year, month, first_weekday) == expected


def test_event_within_one_week(make_event):
    trip = make_event("Trip", date(2024, 7, 1), date(2024, 7, 6))

    segments = slice_event(trip, 0, 2024, 7, SUNDAY)

    assert spans(segments) == [(0, 2, 8, "full")]
    assert not segments[0].is_continuation_start
    assert not segments[0].is_continuation_end


def test_event_across_a_week_boundary(make_event):
    event = make_event("Retreat", date(2024, 7, 3), date(2024, 7, 12))

    first, second = slice_event(event, 0, 2024, 7, SUNDAY)

    assert spans([first, second]) == [(0, 4, 8, "left"), (1, 1, 7, "right")]
    assert first.is_continuation_end and not first.is_continuation_start
    assert second.is_continuation_start and not second.is_continuation_end


def test_middle_week_is_a_continuation_both_ways(make_event):
    event = make_event("Sabbatical", date(2024, 7, 3), date(2024, 7, 25))

    segments = slice_event(event, 0, 2024, 7, SUNDAY)

    assert [s.row_index for s in segments] == [0, 1, 2, 3]
    middle = segments[1]
    assert middle.rounding == "none"
    assert middle.is_continuation_start and middle.is_continuation_end
    assert (middle.col_start, middle.col_end) == (1, 8)


def test_event_across_a_month_boundary(make_event):
    event = make_event("Ski trip", date(2024, 1, 30), date(2024, 2, 3))

    january = slice_event(event, 0, 2024, 1, SUNDAY)
    february = slice_event(event, 0, 2024, 2, SUNDAY)

    assert spans(january) == [(4, 3, 5, "left")]
    assert january[0].is_continuation_end
    assert not january[0].is_continuation_start
    assert spans(february) == [(0, 5, 8, "right")]
    assert february[0].is_continuation_start
    assert not february[0].is_continuation_end


def test_exclusive_end_day_is_drawn_on_the_first_of_the_month(make_event):
    event = make_event("Long weekend", date(2024, 1, 27), date(2024, 2, 1))

    assert spans(slice_event(event, 0, 2024, 2, SUNDAY)) == [(0, 5, 6, "right")]


def test_event_outside_month_has_no_segments(make_event):
    event = make_event("Spring", date(2024, 3, 1), date(2024, 3, 10))

    assert slice_event(event, 0, 2024, 7, SUNDAY) == []
    assert slice_event(event, 0, 2024, 1, SUNDAY) == []


def test_event_covering_whole_month(make_event):
    event = make_event("Summer", date(2024, 6, 15), date(2024, 8, 15))

    segments = slice_event(event, 0, 2024, 7, SUNDAY)

    assert len(segments) == row_count(2024, 7, SUNDAY)
    assert all(s.rounding == "none" for s in segments)
    assert segments[0].col_start == 2
    assert segments[-1].col_end == 5  # Wednesday the 31st


def test_first_weekday_changes_columns(make_event):
    trip = make_event("Trip", date(2024, 7, 1), date(2024, 7, 6))

    assert spans(slice_event(trip, 0, 2024, 7, MONDAY)) == [(0, 1, 7, "full")]


def test_colors(make_event):
    own = make_event("Trip", date(2024, 7, 1), date(2024, 7, 6), color="teal")
    plain = make_event("Trip", date(2024, 7, 1), date(2024, 7, 6))

    assert event_color(own, 3) == "teal"
    assert event_color(plain, 3) == EVENT_COLORS[(4 + 3) % len(EVENT_COLORS)]


def test_segment_ids(make_event):
    event = replace(make_event("Trip", date(2024, 7, 1), date(2024, 7, 6)), id="")

    segment = slice_event(event, 2, 2024, 7, SUNDAY)[0]

    assert segment.event_id == "Trip-2-1"


def test_classify_rounding():
    assert classify_rounding(True, True) == "full"
    assert classify_rounding(True, False) == "left"
    assert classify_rounding(False, True) == "right"
    assert classify_rounding(False, False) == "none"


def test_segment_month_groups_by_row(sample_events):
    rows = segment_month(2024, 5, sample_events, SUNDAY)

    assert len(rows) == row_count(2024, 5, SUNDAY)
    for row_index, segments in enumerate(rows):
        assert all(s.row_index == row_index for s in segments)
    assert sum(len(r) for r in rows) == 6

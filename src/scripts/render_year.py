#!/usr/bin/env python3
"""
Print a plain-text twelve-month view of multi-day calendar events.

Each source is a local .ics file or an http(s) URL. Sources that fail to
load are reported and skipped.

Usage:
    uv run python src/scripts/render_year.py --year 2025 calendar.ics
    uv run python src/scripts/render_year.py --rolling https://example.com/team.ics
    uv run python src/scripts/render_year.py --mock
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import FIRST_WEEKDAY
from models.events import MonthLayout
from services.grid import build_year
from services.sources import ingest_all
from services.state import clear_all, initial_state, toggle_view_mode

WEEKDAY_LETTERS = ["M", "T", "W", "T", "F", "S", "S"]
CELL_WIDTH = 3


# =============================================================================
# TEXT RENDERING
# =============================================================================


def weekday_header(first_weekday: int) -> str:
    letters = [WEEKDAY_LETTERS[(first_weekday + i) % 7] for i in range(7)]
    return "".join(letter.rjust(CELL_WIDTH) for letter in letters)


def format_month(layout: MonthLayout, first_weekday: int) -> list[str]:
    """Render one month as lines of text."""
    lines = [f"{layout.name} {layout.year}", weekday_header(first_weekday)]

    for row in layout.rows:
        lines.append(
            "".join(
                (str(day) if day else "").rjust(CELL_WIDTH) for day in row.day_numbers
            )
        )
        for lane_index in range(row.lane_count):
            labels = []
            for assignment in row.lane_assignments:
                if assignment.lane_index != lane_index:
                    continue
                segment = assignment.segment
                marker = "» " if segment.is_continuation_start else ""
                labels.append(f"{marker}{segment.title}[{segment.col_start}-{segment.col_end})")
            lines.append("    " + "  ".join(labels))

    return lines


# =============================================================================
# MAIN
# =============================================================================


def main(
    sources: list[str],
    year: int | None = None,
    rolling: bool = False,
    mock: bool = False,
    first_weekday: int = FIRST_WEEKDAY,
) -> int:
    """Load sources, lay out twelve months and print them. Returns an exit code."""
    state = initial_state(date(year, 1, 1) if year else None)
    if not mock:
        state = clear_all(state)
    if rolling:
        state = toggle_view_mode(state)

    if sources:
        print(f"Loading {len(sources)} calendar(s)...")
        state, errors = ingest_all(state, sources)
        for error in errors:
            print(f"  {error.source_name}: {error}")

    if not state.events:
        print("No multi-day events to show.")
        return 1

    print(f"\n{len(state.events)} events from {len(state.sources)} source(s)\n")
    months = build_year(
        state.events,
        state.selected_year,
        state.view_mode,
        first_weekday=first_weekday,
    )
    for layout in months:
        print("\n".join(format_month(layout, first_weekday)))
        print()

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print a year of multi-day calendar events")
    parser.add_argument("sources", nargs="*", help=".ics files or calendar URLs")
    parser.add_argument(
        "--year",
        type=int,
        help=f"Selected year. Defaults to the current year ({date.today().year}).",
    )
    parser.add_argument(
        "--rolling",
        action="store_true",
        help="Show twelve months starting at the current month instead of January-December.",
    )
    parser.add_argument("--mock", action="store_true", help="Include the example events.")
    parser.add_argument(
        "--first-weekday",
        type=int,
        default=FIRST_WEEKDAY,
        help="First grid column as a Python weekday number (0=Monday, 6=Sunday).",
    )
    args = parser.parse_args()

    sys.exit(main(args.sources, args.year, args.rolling, args.mock, args.first_weekday))

"""
Lane stacking for the segments of one week row.

Greedy first-fit over segments sorted by start column uses as many lanes
as the largest number of segments overlapping any single column.
"""

from core.config import EVENT_GAP, EVENT_HEIGHT, ROW_HEADER_HEIGHT, ROW_PADDING
from models.events import LaneAssignment, Segment


def stacking_order(segments: list[Segment]) -> list[Segment]:
    """Sort by start column, wider segments first on ties."""
    return sorted(segments, key=lambda s: (s.col_start, -s.span))


def lane_top(lane_index: int) -> float:
    """Vertical offset of a lane below the day-number header."""
    return ROW_HEADER_HEIGHT + lane_index * (EVENT_HEIGHT + EVENT_GAP)


def row_height(lane_count: int) -> float:
    """Height a week row needs to show lane_count lanes."""
    return max(
        ROW_HEADER_HEIGHT + ROW_PADDING,
        ROW_HEADER_HEIGHT + lane_count * (EVENT_HEIGHT + EVENT_GAP) + ROW_PADDING,
    )


def assign_lanes(segments: list[Segment]) -> tuple[list[LaneAssignment], int]:
    """
    Place each segment on the first lane that is free at its start column.

    Returns the assignments in stacking order and the number of lanes used.
    """
    lane_free_at: list[int] = []
    assignments = []

    for segment in stacking_order(segments):
        lane_index = -1
        for i, free_at in enumerate(lane_free_at):
            if free_at <= segment.col_start:
                lane_index = i
                break
        if lane_index == -1:
            lane_index = len(lane_free_at)
            lane_free_at.append(0)
        lane_free_at[lane_index] = segment.col_end

        assignments.append(
            LaneAssignment(segment=segment, lane_index=lane_index, top=lane_top(lane_index))
        )

    return assignments, len(lane_free_at)


def max_overlap(segments: list[Segment]) -> int:
    """Largest number of segments covering any one column."""
    best = 0
    for column in range(1, 8):
        active = sum(1 for s in segments if s.col_start <= column < s.col_end)
        best = max(best, active)
    return best

"""Pydantic models for the year layout returned to renderers."""

from pydantic import BaseModel, ConfigDict


class SegmentModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    event_id: str
    title: str
    row_index: int
    col_start: int
    col_end: int
    is_continuation_start: bool
    is_continuation_end: bool
    rounding: str
    color: str


class LaneAssignmentModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    segment: SegmentModel
    lane_index: int
    top: float


class RowModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    row_index: int
    day_numbers: list[int | None]
    lane_assignments: list[LaneAssignmentModel]
    lane_count: int
    height: float


class MonthModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    name: str
    row_count: int
    rows: list[RowModel]


class SourceModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str


class SourceErrorModel(BaseModel):
    """One failed source, reported by name."""

    source: str
    code: str
    message: str


class YearLayoutResponse(BaseModel):
    """Twelve laid-out months plus the sources that fed them."""

    year: int
    view_mode: str
    sources: list[SourceModel]
    event_count: int
    months: list[MonthModel]
    errors: list[SourceErrorModel] = []

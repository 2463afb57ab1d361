"""API Pydantic models."""

from .layout import MonthModel, SourceErrorModel, SourceModel, YearLayoutResponse
from .responses import ErrorCodes, ErrorResponse, HealthResponse

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "MonthModel",
    "SourceModel",
    "SourceErrorModel",
    "YearLayoutResponse",
]

"""Year layout endpoints."""

import asyncio
import time
from datetime import date
from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Request,
    UploadFile,
    status,
)

from api.dependencies import get_client_ip, verify_api_key
from api.logging import RequestLog, safe_log_request
from api.models.layout import MonthModel, SourceErrorModel, SourceModel, YearLayoutResponse
from api.models.responses import ErrorCodes
from core.config import ICS_EXTENSION, MAX_UPLOAD_SIZE_BYTES
from models.events import AppState
from services.grid import VIEW_CALENDAR, VIEW_MODES, build_year
from services.sources import AcquisitionError, SourceError, ingest_text, ingest_url
from services.state import initial_state, toggle_view_mode

router = APIRouter(prefix="/v1")


def parse_view_mode(view_mode: str) -> str:
    """Validate the requested view mode."""
    if view_mode not in VIEW_MODES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid view_mode",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": [f"Expected one of: {', '.join(VIEW_MODES)}"],
            },
        )
    return view_mode


def build_response(state: AppState, errors: list[SourceErrorModel]) -> YearLayoutResponse:
    months = build_year(state.events, state.selected_year, state.view_mode)
    return YearLayoutResponse(
        year=state.selected_year,
        view_mode=state.view_mode,
        sources=[SourceModel.model_validate(s) for s in state.sources],
        event_count=len(state.events),
        months=[MonthModel.model_validate(m) for m in months],
        errors=errors,
    )


def source_error_model(error: SourceError) -> SourceErrorModel:
    code = (
        ErrorCodes.ACQUISITION_FAILED
        if isinstance(error, AcquisitionError)
        else ErrorCodes.SOURCE_PARSE_FAILED
    )
    return SourceErrorModel(source=error.source_name, code=code, message=str(error))


async def read_upload(upload: UploadFile) -> str:
    """Read an uploaded .ics file as text, or raise AcquisitionError."""
    name = upload.filename or "upload"
    if not name.endswith(ICS_EXTENSION):
        raise AcquisitionError(name, f"Skipping {name}: Not an {ICS_EXTENSION} file")

    content = await upload.read()
    if len(content) > MAX_UPLOAD_SIZE_BYTES:
        max_mb = MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)
        raise AcquisitionError(name, f"{name} exceeds maximum size of {max_mb} MB")

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AcquisitionError(name, f"{name} is not UTF-8 text") from e


@router.post("/layout", response_model=YearLayoutResponse)
async def layout_calendars(
    request: Request,
    files: Annotated[
        list[UploadFile] | None, File(description="iCalendar (.ics) files")
    ] = None,
    urls: Annotated[
        list[str] | None, Form(description="Remote calendar URLs")
    ] = None,
    year: Annotated[int | None, Form(description="Selected year")] = None,
    view_mode: Annotated[str, Form(description="'calendar' or 'rolling'")] = VIEW_CALENDAR,
    _api_key: str = Depends(verify_api_key),
):
    """
    Lay out the multi-day events of uploaded and remote calendars.

    Sources that fail are listed in `errors`; the request only fails when
    no source could be loaded.
    """
    start_time = time.time()
    files = files or []
    urls = urls or []

    request_log = RequestLog(
        endpoint="/v1/layout",
        method="POST",
        client_ip=get_client_ip(request),
        source_count=len(files) + len(urls),
    )

    try:
        view_mode = parse_view_mode(view_mode)
        if not files and not urls:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "error": "No calendar provided",
                    "code": ErrorCodes.INVALID_REQUEST,
                    "details": ["Upload .ics files or pass urls"],
                },
            )

        state = AppState(selected_year=year or date.today().year, view_mode=view_mode)
        errors: list[SourceErrorModel] = []

        for upload in files:
            try:
                text = await read_upload(upload)
                state = ingest_text(state, text, upload.filename, "file")
            except SourceError as e:
                errors.append(source_error_model(e))

        for url in urls:
            try:
                state = await asyncio.to_thread(ingest_url, state, url)
            except SourceError as e:
                errors.append(source_error_model(e))

        for error in errors:
            request_log.details.append(("source_error", f"{error.source}: {error.message}"))
        for source in state.sources:
            request_log.details.append(("source_loaded", source.name))

        if not state.sources:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={
                    "error": "No calendar could be loaded",
                    "code": ErrorCodes.NO_EVENTS,
                    "details": [e.message for e in errors],
                },
            )

        response = build_response(state, errors)
        request_log.status_code = 200
        request_log.events_loaded = response.event_count
        return response

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
        else:
            request_log.error_message = str(e.detail)
        raise

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Internal server error",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        safe_log_request(request_log)


@router.get("/layout/mock", response_model=YearLayoutResponse)
async def layout_mock(
    year: int | None = None,
    view_mode: str = VIEW_CALENDAR,
    _api_key: str = Depends(verify_api_key),
):
    """Lay out the built-in example events."""
    view_mode = parse_view_mode(view_mode)
    state = initial_state(date(year, 1, 1) if year else None)
    if view_mode != state.view_mode:
        state = toggle_view_mode(state)
    return build_response(state, [])

"""Same-origin relay for calendar URLs that block cross-origin requests."""

import asyncio
import time

import requests
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from api.dependencies import get_client_ip
from api.logging import RequestLog, safe_log_request
from api.models.responses import ErrorCodes
from services.sources import fetch_text

router = APIRouter()


@router.get("/proxy", response_class=PlainTextResponse)
async def proxy_calendar(request: Request, url: str | None = None):
    """
    Fetch a remote calendar and return its body as text.

    Upstream HTTP errors are passed through with their status code.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/proxy",
        method="GET",
        client_ip=get_client_ip(request),
        target_url=url,
    )

    try:
        if not url:
            print("Proxy request missing URL")
            request_log.status_code = 400
            request_log.error_code = ErrorCodes.INVALID_REQUEST
            request_log.error_message = "URL is required"
            return PlainTextResponse("URL is required", status_code=400)

        print(f"Proxying request for: {url}")
        try:
            text = await asyncio.to_thread(fetch_text, url)
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 500
            print(f"Error fetching URL: {e}")
            print(f"Response status: {status_code}")
            request_log.status_code = status_code
            request_log.error_code = ErrorCodes.ACQUISITION_FAILED
            request_log.error_message = str(e)
            return PlainTextResponse(str(e), status_code=status_code)
        except requests.RequestException as e:
            print(f"Error fetching URL: {e}")
            request_log.status_code = 500
            request_log.error_code = ErrorCodes.ACQUISITION_FAILED
            request_log.error_message = str(e)
            return PlainTextResponse(f"Error fetching URL: {e}", status_code=500)

        print("Proxy request successful")
        request_log.status_code = 200
        return PlainTextResponse(text)

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        safe_log_request(request_log)

"""Request id and access logging middleware."""

import time
import uuid

import structlog
from fastapi import Request

from devconnector.exception_handlers import server_error_response

logger = structlog.get_logger(__name__)


async def log_requests(request: Request, call_next):
    """Tag each request with an id, bind it to the log context, and log completion."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )

    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as exc:
        # Unhandled route errors re-raise through call_next
        response = server_error_response(request, exc)
    duration_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        "request_completed",
        status_code=response.status_code,
        duration_ms=round(duration_ms, 2),
    )
    response.headers["X-Request-ID"] = request_id
    return response

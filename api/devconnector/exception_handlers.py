"""Exception handlers: the one place errors become HTTP responses."""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from devconnector.exceptions import AppError

logger = structlog.get_logger(__name__)


def _validation_error_detail(error: dict[str, Any]) -> dict[str, str]:
    """
    Flatten one Pydantic error to ``{msg, param, location}``.

    Messages raised by our own field validators are used verbatim instead of
    Pydantic's "Value error, ..." wording.
    """
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else "body"
    param = ".".join(loc[1:])

    msg = error.get("msg", "Invalid value")
    if error.get("type") == "value_error":
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            msg = str(ctx_error)

    return {"msg": msg, "param": param, "location": location}


def server_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure server-side; the client only sees a generic 500."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=getattr(request.state, "request_id", None),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": "Server error"},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Handle application errors raised by route handlers and dependencies."""
        logger.info(
            "app_error",
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            message=exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.body())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report every failed field rule at once with 400."""
        errors = [_validation_error_detail(e) for e in exc.errors()]
        logger.info("validation_error", errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": errors},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Failures raised outside the request logging middleware."""
        return server_error_response(request, exc)

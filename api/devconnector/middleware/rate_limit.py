"""Rate limiting for the public credential endpoints using slowapi."""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

# Keyed by client address; only register and login are decorated.
limiter = Limiter(key_func=get_remote_address)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer 429 in the same ``{"msg": ...}`` shape as auth failures."""
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"msg": f"Rate limit exceeded: {exc.detail}"},
    )


def reset_limiter() -> None:
    """Clear all recorded hits. Used in tests to isolate rate limit state."""
    limiter.reset()

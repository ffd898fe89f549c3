"""Rate limiting configuration for the public trainer page API.

Uses slowapi; storage defaults to in-process memory and can point at a shared
backend through ``RATE_LIMIT_STORAGE_URI``.
"""

from functools import lru_cache

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from libs.common.config import get_settings


def _get_client_ip(request: Request) -> str:
    """
    Get client IP from request, handling proxies.

    Checks X-Forwarded-For header first (for proxied requests),
    then falls back to direct connection IP.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # Take the first IP in the chain (original client)
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


@lru_cache
def get_limiter() -> Limiter:
    """
    Create and return a cached Limiter instance keyed by client IP.
    """
    settings = get_settings()

    return Limiter(
        key_func=_get_client_ip,
        default_limits=["100/minute"],
        storage_uri=settings.RATE_LIMIT_STORAGE_URI,
        strategy="fixed-window",
    )


limiter = get_limiter()


def invitation_limit_value() -> str:
    return get_settings().INVITATION_RATE_LIMIT


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """
    Custom handler for rate limit exceeded errors.

    Returns a JSON response with clear error message and retry-after header.
    """
    retry_after = exc.detail.split("per")[0].strip() if exc.detail else "1 minute"

    return JSONResponse(
        status_code=429,
        content={
            "detail": f"Rate limit exceeded. Try again in {retry_after}.",
            "code": "RATE_LIMIT_EXCEEDED",
        },
        headers={
            "Retry-After": str(getattr(exc, "retry_after", 60)),
            "X-RateLimit-Limit": str(getattr(exc, "limit", "unknown")),
        },
    )

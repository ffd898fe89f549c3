"""Request tracing middleware for the trainer profile service.

Every request gets an ID (the caller's ``X-Request-ID`` when present) that is
bound to the logging context, forwarded on backend calls by
``libs.common.service_client`` and echoed on the response. One completion line
is logged per request, except for the polling endpoints in ``QUIET_PATHS``.
"""
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from libs.common.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Hit by probes and by every page load; not worth a log line each.
QUIET_PATHS = frozenset({"/health", "/config"})


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request ID for the lifetime of the request and log the outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        request_id = set_request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            path=path,
            method=request.method,
        )
        start_time = time.perf_counter()

        try:
            response = await call_next(request)

            if path not in QUIET_PATHS:
                # Upstream 4xx/5xx are mapped onto our responses, so flag them.
                log = logger.warning if response.status_code >= 400 else logger.info
                log(
                    f"{request.method} {path} -> {response.status_code}",
                    extra={"extra_fields": {
                        "status_code": response.status_code,
                        "duration_ms": _elapsed_ms(start_time),
                    }},
                )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception:
            logger.exception(
                f"{request.method} {path} raised",
                extra={"extra_fields": {"duration_ms": _elapsed_ms(start_time)}},
            )
            raise

        finally:
            clear_request_context()


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def add_observability_middleware(app: FastAPI) -> None:
    """Configure logging and install request tracing on ``app``."""
    configure_logging()
    app.add_middleware(RequestContextMiddleware)

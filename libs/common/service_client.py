"""Reusable async HTTP client for calls to the trainer backend API.

Every call opens a short-lived ``httpx.AsyncClient``. Callers may inject a
transport (``httpx.MockTransport`` in tests, ``httpx.ASGITransport`` for an
in-process backend).
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from libs.common.logging import get_logger, get_request_id

logger = get_logger(__name__)


async def api_request(
    *,
    base_url: str,
    method: str,
    path: str,
    json: Any = None,
    params: Optional[dict] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Make an HTTP call against the trainer backend.

    Args:
        base_url: Backend base URL (e.g. settings.API_BASE_URL).
        method: HTTP method (GET, POST, …).
        path: URL path appended to ``base_url`` (e.g. "/invitation/request").
        json: Optional JSON body.
        params: Optional query parameters.
        timeout: Request timeout in seconds; None waits indefinitely.
        transport: Optional transport override.

    Returns:
        The httpx.Response object. Non-2xx statuses are NOT raised.

    Raises:
        httpx.RequestError on connection failures.
    """
    url = f"{base_url}{path}"
    headers = {"Accept": "application/json"}
    request_id = get_request_id()
    if request_id:
        headers["X-Request-ID"] = request_id

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.request(
            method,
            url,
            headers=headers,
            json=json,
            params=params,
        )
    logger.debug(f"{method} {url} -> {response.status_code}")
    return response


async def api_get(
    *,
    base_url: str,
    path: str,
    params: Optional[dict] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Convenience wrapper for GET requests."""
    return await api_request(
        base_url=base_url,
        method="GET",
        path=path,
        params=params,
        timeout=timeout,
        transport=transport,
    )


async def api_post(
    *,
    base_url: str,
    path: str,
    json: Any = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Convenience wrapper for POST requests."""
    return await api_request(
        base_url=base_url,
        method="POST",
        path=path,
        json=json,
        timeout=timeout,
        transport=transport,
    )


def error_text(response: httpx.Response) -> Optional[str]:
    """Return the ``error`` field of a JSON error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
    return None

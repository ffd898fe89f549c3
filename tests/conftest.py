import inspect
from typing import AsyncGenerator, Callable, Optional, Union

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from libs.common.config import Settings, get_settings

Route = Union[httpx.Response, Callable[[httpx.Request], object]]


class FakeBackend:
    """
    In-memory stand-in for the trainer backend API.

    Routes are keyed by (method, path relative to API_BASE_URL). A route is
    either a status/body pair or a handler (sync or async) that receives the
    request. Every request is recorded in ``requests``.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url
        self.base_path = httpx.URL(base_url).path.rstrip("/")
        self.routes: dict[tuple[str, str], Route] = {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def on(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: object = None,
        handler: Optional[Callable] = None,
    ) -> None:
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if json is None:
                    return httpx.Response(status_code)
                return httpx.Response(status_code, json=json)

        self.routes[(method.upper(), path)] = handler

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.method == method.upper() and r.url.path == f"{self.base_path}{path}"
        ]

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(self.base_path):]
        handler = self.routes.get((request.method, path))
        if handler is None:
            return httpx.Response(404, json={"error": "Not found"})
        result = handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def backend(settings) -> FakeBackend:
    return FakeBackend(settings.API_BASE_URL)


class FakeWidget:
    """Records resets of the verification challenge."""

    def __init__(self):
        self.resets = 0

    def reset(self) -> None:
        self.resets += 1


@pytest.fixture
def widget() -> FakeWidget:
    return FakeWidget()


@pytest_asyncio.fixture
async def client(backend) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient bound to the app with backend calls routed to the fake.
    """
    from services.trainer_profile_service.app.main import app
    from services.trainer_profile_service.router import get_backend_transport

    app.dependency_overrides[get_backend_transport] = lambda: backend.transport

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

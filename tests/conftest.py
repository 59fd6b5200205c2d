"""Shared pytest fixtures for response-time-middleware tests."""

from collections.abc import Callable, Iterable
from types import SimpleNamespace
from typing import Any

import pytest
from starlette.responses import Response

from response_time_middleware.core import middleware as middleware_module


@pytest.fixture
def make_request():
    """Create a minimal request object carrying an ASGI-style scope.

    Returns a callable that accepts:
    - method: HTTP method (default "GET")
    - path: request path (default "/")
    - **environ: extra scope entries (e.g. REQUEST_TIME_FLOAT=...)
    """

    def _create(method: str = "GET", path: str = "/", **environ: Any) -> SimpleNamespace:
        scope: dict[str, Any] = {"type": "http", "method": method, "path": path}
        scope.update(environ)
        return SimpleNamespace(scope=scope)

    return _create


@pytest.fixture
def make_handler():
    """Create an async downstream handler returning a fixed Starlette response.

    Returns a callable that accepts:
    - status_code: response status (default 200)
    - content: response body (default b"")
    - headers: extra response headers

    The handler records every request it receives on ``handler.calls``.
    """

    def _create(
        status_code: int = 200,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> Callable[[Any], Any]:
        calls: list[Any] = []

        async def handler(request: Any) -> Response:
            calls.append(request)
            return Response(content=content, status_code=status_code, headers=headers)

        handler.calls = calls  # type: ignore[attr-defined]
        return handler

    return _create


@pytest.fixture
def fake_clock(monkeypatch: pytest.MonkeyPatch):
    """Replace the middleware's clock with a scripted sequence of readings.

    Returns a callable that accepts an iterable of epoch seconds; each call
    to ``time.time()`` inside the middleware consumes the next value.
    """

    def _install(readings: Iterable[float]) -> None:
        values = iter(readings)
        monkeypatch.setattr(
            middleware_module,
            "time",
            SimpleNamespace(time=lambda: next(values)),
        )

    return _install

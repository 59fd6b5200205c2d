"""Starlette/FastAPI integration for the response time middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from response_time_middleware.core.context import REQUEST_TIME_FLOAT, RequestContext
from response_time_middleware.core.middleware import ResponseTimeMiddleware

logger = logging.getLogger(__name__)


class RequestTimeMiddleware:
    """Pure ASGI middleware that records when a request was received.

    Stores ``time.time()`` in the scope under ``REQUEST_TIME_FLOAT`` unless
    a numeric value is already there (e.g. set by the server or a proxy
    middleware further out). Non-HTTP scopes are passed through untouched.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            if RequestContext.from_environ(scope).request_time_float is None:
                scope[REQUEST_TIME_FLOAT] = time.time()
        await self.app(scope, receive, send)


class ResponseTimeHTTPMiddleware(BaseHTTPMiddleware):
    """BaseHTTPMiddleware adapter around ResponseTimeMiddleware."""

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self.timer = ResponseTimeMiddleware()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        return await self.timer(request, call_next)  # type: ignore[no-any-return]


def add_response_time_middleware(
    app: ASGIApp,
    *,
    stamp_request_time: bool = True,
) -> None:
    """Register response timing on a Starlette or FastAPI application.

    Starlette runs the most recently added middleware first, so the
    request time stamper is added last to make it the outermost layer.
    Call this after registering other middleware to have the measured
    span cover them too.

    Args:
        app: A Starlette or FastAPI application.
        stamp_request_time: Also install RequestTimeMiddleware so the
            start time is taken as early as possible.

    Example:
        from fastapi import FastAPI
        from response_time_middleware.fastapi import add_response_time_middleware

        app = FastAPI()
        add_response_time_middleware(app)
    """
    app.add_middleware(ResponseTimeHTTPMiddleware)  # type: ignore[attr-defined]
    if stamp_request_time:
        app.add_middleware(RequestTimeMiddleware)  # type: ignore[attr-defined]

    logger.info(
        "Response time middleware registered",
        extra={
            "app": type(app).__name__,
            "stamp_request_time": stamp_request_time,
        },
    )

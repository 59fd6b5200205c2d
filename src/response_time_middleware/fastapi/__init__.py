"""FastAPI adapter for response time middleware."""

from response_time_middleware.fastapi.middleware import (
    RequestTimeMiddleware,
    ResponseTimeHTTPMiddleware,
    add_response_time_middleware,
)

__all__ = [
    "RequestTimeMiddleware",
    "ResponseTimeHTTPMiddleware",
    "add_response_time_middleware",
]

"""Response time middleware: adds an X-Response-Time header to responses."""

# Primary API — the middleware and its header helpers
from response_time_middleware.core.context import REQUEST_TIME_FLOAT, RequestContext
from response_time_middleware.core.middleware import (
    HEADER,
    ResponseTimeMiddleware,
    format_response_time,
)

# Pipeline composition
from response_time_middleware.core.pipeline import build_middleware_chain, run_pipeline

# Container registration
from response_time_middleware.core.provider import (
    ConfigProvider,
    ResponseTimeMiddlewareFactory,
)

# Exceptions — for error handling
from response_time_middleware.exceptions import (
    MiddlewareValidationError,
    ResponseTimeMiddlewareError,
)
from response_time_middleware.fastapi.middleware import add_response_time_middleware

__all__ = [
    # Primary API
    "ResponseTimeMiddleware",
    "format_response_time",
    "HEADER",
    "REQUEST_TIME_FLOAT",
    "RequestContext",
    # Framework integration
    "add_response_time_middleware",
    # Pipeline
    "build_middleware_chain",
    "run_pipeline",
    # Registration
    "ConfigProvider",
    "ResponseTimeMiddlewareFactory",
    # Exceptions
    "MiddlewareValidationError",
    "ResponseTimeMiddlewareError",
]

__version__ = "1.0.0"

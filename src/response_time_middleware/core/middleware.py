"""Response time middleware.

Framework-free: works with any ``(request, call_next)`` pipeline whose
responses expose a mutable ``headers`` mapping.
"""

import time
from collections.abc import Awaitable, Callable
from typing import Any

from response_time_middleware.core.context import RequestContext

HEADER = "X-Response-Time"


def format_response_time(elapsed_ms: float) -> str:
    """Format a duration in milliseconds as the header value.

    Negative durations (a start time later than the end time) are
    formatted as-is.

    Example:
        >>> format_response_time(123.4564)
        '123.456 ms'
    """
    return f"{elapsed_ms:.3f} ms"


class ResponseTimeMiddleware:
    """Set ``X-Response-Time`` on every successful response.

    The start time is the request's ``REQUEST_TIME_FLOAT`` when present,
    otherwise the wall-clock time at which this middleware was entered.
    Exceptions from ``call_next`` propagate unchanged and no header is set.

    Example:
        middleware = [ResponseTimeMiddleware()]
    """

    async def __call__(
        self,
        request: Any,
        call_next: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        context = RequestContext.from_request(request)
        start_time = context.request_time_float
        if start_time is None:
            start_time = time.time()

        response = await call_next(request)
        end_time = time.time()

        response.headers[HEADER] = format_response_time(1000 * (end_time - start_time))
        return response

"""Middleware pipeline composition.

Wraps a handler in an ordered stack of ``(request, call_next)`` middleware
and runs a request through it.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from starlette.responses import Response

from response_time_middleware.exceptions import MiddlewareValidationError


def normalize_middleware(
    middleware_attr: Any,
    *,
    source: str = "",
) -> tuple[Callable[..., Any], ...]:
    """Normalize a middleware value to a tuple of callables.

    Accepts: None, single callable, list, or tuple.
    Returns: tuple of callables (empty if None).

    Args:
        middleware_attr: The middleware value to normalize.
        source: Context for error messages (e.g., "run_pipeline").

    Raises:
        MiddlewareValidationError: If middleware_attr is not a valid type or
            contains a non-callable entry.
    """
    prefix = f"{source}: " if source else ""
    if middleware_attr is None:
        return ()
    if callable(middleware_attr) and not isinstance(middleware_attr, (list, tuple)):
        return (middleware_attr,)
    if not isinstance(middleware_attr, (list, tuple)):
        raise MiddlewareValidationError(
            f"{prefix}middleware must be a list or callable, "
            f"got {type(middleware_attr).__name__}"
        )
    for index, mw in enumerate(middleware_attr):
        if not callable(mw):
            raise MiddlewareValidationError(
                f"{prefix}middleware stack contains non-callable at index {index}"
            )
    return tuple(middleware_attr)


def build_middleware_chain(
    handler: Callable[..., Any],
    middleware_stack: Sequence[Callable[..., Any]],
) -> Callable[..., Any]:
    """Wrap a handler function with a middleware chain.

    Composes middleware in order so that the first middleware in the list
    is the outermost (executes first). Each middleware receives (request, call_next)
    where call_next invokes the next middleware or handler.

    Args:
        handler: The innermost async handler, ``handler(request) -> response``.
        middleware_stack: Ordered sequence of middleware (outermost first).

    Returns:
        A wrapped handler function that executes the middleware chain.
        If middleware_stack is empty, returns the handler unchanged.
    """
    if not middleware_stack:
        return handler

    # Build chain from inside out (last middleware wraps handler first)
    chain = handler
    for mw in reversed(middleware_stack):
        chain = _wrap_with_middleware(chain, mw)
    return chain


async def _empty_response(request: Any) -> Response:
    """Default innermost handler: an empty 200 response."""
    return Response(status_code=200)


async def run_pipeline(
    middleware_stack: Any,
    request: Any,
    handler: Callable[[Any], Awaitable[Any]] | None = None,
) -> Any:
    """Run a request through a middleware stack and return the response.

    Args:
        middleware_stack: None, a middleware callable, or a list/tuple of them.
        request: The request passed to the outermost middleware.
        handler: Innermost handler; defaults to one returning an empty 200.

    Raises:
        MiddlewareValidationError: If the stack is misconfigured.
    """
    stack = normalize_middleware(middleware_stack, source="run_pipeline")
    chain = build_middleware_chain(handler or _empty_response, stack)
    return await chain(request)


def _wrap_with_middleware(
    next_handler: Callable[..., Any],
    middleware: Callable[..., Any],
) -> Callable[..., Any]:
    """Wrap a handler with a single middleware function.

    Args:
        next_handler: The next function in the chain (middleware or handler).
        middleware: The middleware function with signature (request, call_next).

    Returns:
        A new async function that calls middleware(request, call_next).
    """

    async def wrapped(request: Any) -> Any:
        async def call_next(req: Any) -> Any:
            return await next_handler(req)

        return await middleware(request, call_next)

    # Preserve metadata for debugging
    middleware_name = getattr(middleware, "__name__", type(middleware).__name__)
    wrapped.__name__ = (
        f"{middleware_name}_wrapping_{getattr(next_handler, '__name__', 'handler')}"
    )
    wrapped.__qualname__ = wrapped.__name__

    return wrapped

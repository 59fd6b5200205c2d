"""Exception hierarchy for response time middleware errors."""


class ResponseTimeMiddlewareError(Exception):
    """Base exception for all errors raised by this package.

    The timing middleware itself never raises: errors coming from the
    downstream handler propagate unchanged. Only pipeline assembly can
    fail with a package error.

    Example:
        try:
            chain = build_middleware_chain(handler, stack)
        except ResponseTimeMiddlewareError as e:
            logger.error(f"Failed to build middleware chain: {e}")
    """


class MiddlewareValidationError(ResponseTimeMiddlewareError):
    """Raised when a middleware stack is misconfigured.

    This exception is raised when:
        - The stack is neither None, a callable, a list nor a tuple
        - The stack contains a non-callable entry

    Example:
        MiddlewareValidationError(
            "run_pipeline: middleware stack contains non-callable at index 1"
        )
    """

"""Request environment access.

The hosting server may record when it first received a request. That
timestamp travels in the request's environment bag (the ASGI scope) under
``REQUEST_TIME_FLOAT`` and is surfaced here as an optional typed field.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

REQUEST_TIME_FLOAT = "REQUEST_TIME_FLOAT"


@dataclass(frozen=True)
class RequestContext:
    """Out-of-band request data read from the environment bag.

    Attributes:
        request_time_float: Epoch seconds at which the server received the
            request, or None when the environment did not supply one.
    """

    request_time_float: float | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> "RequestContext":
        """Build a context from an environment mapping.

        Only int and float values are accepted; bools, strings and other
        types are treated as absent.
        """
        value = environ.get(REQUEST_TIME_FLOAT)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return cls()
        return cls(request_time_float=float(value))

    @classmethod
    def from_request(cls, request: Any) -> "RequestContext":
        """Build a context from a request exposing an ASGI ``scope``."""
        scope = getattr(request, "scope", None)
        if not isinstance(scope, Mapping):
            return cls()
        return cls.from_environ(scope)

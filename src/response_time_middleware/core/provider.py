"""Registration glue for dependency containers.

Neither class depends on a container implementation: the factory ignores
whatever container it is handed, and the provider returns a static table.
"""

import logging
from typing import Any

from response_time_middleware.core.middleware import ResponseTimeMiddleware

logger = logging.getLogger(__name__)


class ResponseTimeMiddlewareFactory:
    """Zero-argument construction recipe for ResponseTimeMiddleware."""

    def __call__(self, container: Any = None) -> ResponseTimeMiddleware:
        logger.debug(
            "Creating response time middleware",
            extra={"container": type(container).__name__},
        )
        return ResponseTimeMiddleware()


class ConfigProvider:
    """Expose the middleware's factory mapping to a service container.

    Example:
        config = ConfigProvider()()
        factory_cls = config["dependencies"]["factories"][ResponseTimeMiddleware]
        middleware = factory_cls()(container)
    """

    def __call__(self) -> dict[str, Any]:
        return {
            "dependencies": self.get_dependencies(),
        }

    def get_dependencies(self) -> dict[str, Any]:
        return {
            "factories": {
                ResponseTimeMiddleware: ResponseTimeMiddlewareFactory,
            },
        }

"""Framework-free pipeline example.

Resolves the middleware through ConfigProvider, the way a service
container would, and runs a request through a plain middleware stack.

Run with:
    python main.py
"""

import asyncio
import time
from types import SimpleNamespace

from starlette.responses import JSONResponse

from response_time_middleware import (
    REQUEST_TIME_FLOAT,
    ConfigProvider,
    ResponseTimeMiddleware,
    run_pipeline,
)


async def handler(request):  # type: ignore[no-untyped-def]
    await asyncio.sleep(0.05)
    return JSONResponse({"path": request.scope["path"]}, status_code=201)


async def main() -> None:
    factories = ConfigProvider()()["dependencies"]["factories"]
    middleware = factories[ResponseTimeMiddleware]()(None)

    request = SimpleNamespace(scope={"type": "http", "path": "/demo"})
    request.scope[REQUEST_TIME_FLOAT] = time.time()

    response = await run_pipeline([middleware], request, handler)
    print(response.status_code, response.headers["X-Response-Time"])


if __name__ == "__main__":
    asyncio.run(main())

"""Basic example demonstrating response-time-middleware.

Run with:
    uvicorn main:app --reload

Every response carries an X-Response-Time header, e.g.:
    curl -i http://localhost:8000/slow
"""

import asyncio

from fastapi import FastAPI

from response_time_middleware import add_response_time_middleware

app = FastAPI(title="Basic Example")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/slow")
async def slow() -> dict[str, str]:
    await asyncio.sleep(0.25)
    return {"status": "done"}


add_response_time_middleware(app)

"""ABOUTME: Weather HTTP service - plain query endpoint and server-sent event stream.

GET /weather returns the result envelope as JSON. GET /weather/stream emits a
progress event at each pipeline checkpoint, then one final "result" (or
"error") event carrying the same envelope.
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import StreamingResponse

from tool_progress import NullProgress, QueueProgress

from .config import WeatherSettings
from .service import WeatherService

logger = logging.getLogger(__name__)

# Query parameters forwarded to the handler
ARGUMENT_KEYS = ("city", "units", "mode", "days", "format")


def query_arguments(request: Request) -> Dict[str, Any]:
    """Map query-string scalars one-to-one onto get_weather argument keys."""
    return {key: request.query_params[key] for key in ARGUMENT_KEYS if key in request.query_params}


def format_sse(event: str, data: Any) -> str:
    """Render one server-sent event frame."""
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


async def stream_weather_events(service: WeatherService, args: Dict[str, Any]) -> AsyncIterator[str]:
    """Run the pipeline and yield SSE frames as it progresses.

    Progress events are drained from a queue while the pipeline runs; a None
    sentinel queued when the pipeline task finishes ends the progress phase.
    """
    queue: "asyncio.Queue[Optional[Dict[str, Any]]]" = asyncio.Queue()
    task = asyncio.create_task(service.get_weather(args, progress=QueueProgress(queue)))
    task.add_done_callback(lambda _: queue.put_nowait(None))

    while True:
        event = await queue.get()
        if event is None:
            break
        yield format_sse("progress", event)

    envelope = task.result()
    yield format_sse("error" if envelope.is_error else "result", envelope.to_wire())


def create_app(service: Optional[WeatherService] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        service: Handler to delegate to (default: one configured from the environment)

    Returns:
        FastAPI app with /health, /weather and /weather/stream
    """
    weather_service = service or WeatherService(WeatherSettings())
    app = FastAPI(title="Weather Service", version="0.1.0")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/weather")
    async def get_weather(request: Request):
        args = query_arguments(request)
        logger.info(f"GET /weather: {args}")
        envelope = await weather_service.get_weather(args, progress=NullProgress())
        return envelope.to_wire()

    @app.get("/weather/stream")
    async def stream_weather(request: Request):
        args = query_arguments(request)
        logger.info(f"GET /weather/stream: {args}")
        return StreamingResponse(
            stream_weather_events(weather_service, args),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache"},
        )

    return app

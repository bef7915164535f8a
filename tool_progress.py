"""
Progress reporting for the weather pipeline.

The pipeline announces three fixed checkpoints (before geocoding, before the
forecast fetch, before final assembly). How a checkpoint reaches the caller
depends on the transport, so each transport hands the pipeline a reporter:

    MCP tool call   → ContextProgress   → ctx.report_progress notifications
    Event stream    → QueueProgress     → asyncio.Queue drained into SSE frames
    Plain HTTP      → NullProgress      → dropped

Progress is a side channel: reporters never acknowledge and the pipeline never
lets a reporter failure change its result.

Usage in the pipeline:
    await progress.update("geocoding", f"Geocoding {city}...")
"""

import asyncio
from typing import Any, Dict, Optional


# Checkpoint names, in emission order
STAGE_GEOCODING = "geocoding"
STAGE_FETCHING = "fetching"
STAGE_ASSEMBLING = "assembling"

STAGES = (STAGE_GEOCODING, STAGE_FETCHING, STAGE_ASSEMBLING)


def progress_event(stage: str, detail: str = "") -> Dict[str, Any]:
    """Build the progress event dict carried by the event stream.

    Example:
        progress_event("fetching", "Fetching hourly forecast...")
        # {"stage": "fetching", "detail": "Fetching hourly forecast..."}
    """
    return {"stage": stage, "detail": detail}


class ProgressReporter:
    """Interface for pipeline progress reporters."""

    async def update(self, stage: str, detail: str = "") -> None:
        raise NotImplementedError


class NullProgress(ProgressReporter):
    """No-op progress tracker (null object pattern).

    Used when the transport has nowhere to send progress, allowing the pipeline
    to call progress methods unconditionally.
    """

    async def update(self, stage: str, detail: str = "") -> None:
        """No-op update."""
        pass


class QueueProgress(ProgressReporter):
    """Push progress events onto an asyncio.Queue without waiting.

    Attributes:
        queue: Queue drained by the event-stream transport
    """

    def __init__(self, queue: "asyncio.Queue[Optional[Dict[str, Any]]]"):
        self.queue = queue

    async def update(self, stage: str, detail: str = "") -> None:
        self.queue.put_nowait(progress_event(stage, detail))


class ContextProgress(ProgressReporter):
    """Forward progress to an MCP request context as progress notifications.

    Attributes:
        ctx: FastMCP Context for the current tool call
    """

    def __init__(self, ctx: Any):
        self.ctx = ctx

    async def update(self, stage: str, detail: str = "") -> None:
        step = STAGES.index(stage) + 1 if stage in STAGES else 0
        await self.ctx.report_progress(step, len(STAGES), detail or stage)

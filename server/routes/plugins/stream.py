"""
Plugin mutation SSE endpoint.
"""

from fastapi import APIRouter
from sse_starlette.sse import EventSourceResponse

from ...dependencies import EventBus, Settings
from ...streaming import event_stream_response


router = APIRouter()


@router.get("/plugins/stream")
async def plugin_stream_route(event_bus: EventBus, settings: Settings) -> EventSourceResponse:
    """Subscribe to plugin create/delete events via SSE."""
    return event_stream_response(event_bus.subscribe(), settings.sse)

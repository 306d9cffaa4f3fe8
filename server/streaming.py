"""
Server-sent event framing for plugin mutation streams.

Keep-alive frames are produced by EventSourceResponse's ping task, which
runs concurrently with the event generator: whichever of "next event" and
"keep-alive interval elapsed" comes first is written to the client.
"""

import logging
from typing import AsyncGenerator

from sse_starlette.sse import EventSourceResponse, ServerSentEvent

from config import SSEConfig
from core import MutationEvent, StreamLagError

from .event_bus import Subscription

logger = logging.getLogger(__name__)


def render_event_frame(event: MutationEvent) -> str:
    """Wrap the compact JSON encoding of an event in an HTML fragment."""
    return f"<div>{event.to_json()}</div>"


def keep_alive_frame(text: str) -> ServerSentEvent:
    """Build the comment frame sent while a stream is idle."""
    return ServerSentEvent(comment=text)


async def plugin_event_stream(
    subscription: Subscription, close_on_lag: bool = True
) -> AsyncGenerator[ServerSentEvent, None]:
    """
    Forward bus events to one client, in publish order.

    The subscription is released when the generator finishes, including
    when the client disconnects and the generator is cancelled.

    Args:
        subscription: Receiver created for this connection
        close_on_lag: End the stream when events were dropped; otherwise
            log the gap and keep streaming
    """
    try:
        while True:
            try:
                event = await subscription.receive()
            except StreamLagError as e:
                if close_on_lag:
                    logger.warning("Closing event stream: %s", e)
                    return
                logger.warning("Event stream continuing after gap: %s", e)
                continue
            yield ServerSentEvent(data=render_event_frame(event))
    finally:
        subscription.close()
        logger.debug("Event stream finished")


def event_stream_response(subscription: Subscription, config: SSEConfig) -> EventSourceResponse:
    """Wrap a subscription in a text/event-stream response with keep-alives."""
    return EventSourceResponse(
        plugin_event_stream(subscription, close_on_lag=config.close_on_lag),
        ping=config.keep_alive_seconds,
        ping_message_factory=lambda: keep_alive_frame(config.keep_alive_text),
    )

"""SSEConfig model."""

from pydantic import BaseModel, Field

from .defaults import (
    DEFAULT_EVENT_BUFFER_SIZE,
    DEFAULT_KEEP_ALIVE_SECONDS,
    DEFAULT_KEEP_ALIVE_TEXT,
)


class SSEConfig(BaseModel):
    """Live update stream settings."""

    keep_alive_seconds: float = Field(
        default=DEFAULT_KEEP_ALIVE_SECONDS,
        gt=0,
        description="Idle interval before a keep-alive frame is sent",
    )
    keep_alive_text: str = Field(
        default=DEFAULT_KEEP_ALIVE_TEXT,
        description="Payload of the keep-alive comment frame",
    )
    event_buffer_size: int = Field(
        default=DEFAULT_EVENT_BUFFER_SIZE,
        ge=1,
        description="Unread events buffered per subscriber before the oldest is dropped",
    )
    close_on_lag: bool = Field(
        default=True,
        description="End a stream whose subscriber fell behind instead of skipping the gap",
    )

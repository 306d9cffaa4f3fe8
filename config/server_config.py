"""ServerConfig model."""

from pydantic import BaseModel, Field

from .defaults import DEFAULT_HOST, DEFAULT_PORT


class ServerConfig(BaseModel):
    """HTTP listener settings."""

    host: str = Field(default=DEFAULT_HOST, description="Interface to bind")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Port to bind")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )

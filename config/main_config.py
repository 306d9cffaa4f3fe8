"""Main Config model."""

from pydantic import BaseModel, Field

from .database_config import DatabaseConfig
from .defaults import DEFAULT_LOG_LEVEL
from .server_config import ServerConfig
from .sse_config import SSEConfig


class Config(BaseModel):
    """Main configuration model."""

    server: ServerConfig = Field(
        default_factory=ServerConfig,
        description="HTTP listener settings",
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig,
        description="Relational store settings",
    )
    sse: SSEConfig = Field(
        default_factory=SSEConfig,
        description="Live update stream settings",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Root log level name",
    )

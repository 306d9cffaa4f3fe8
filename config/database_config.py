"""DatabaseConfig model."""

from pydantic import BaseModel, Field

from .defaults import (
    DEFAULT_DATABASE_URL,
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_POOL_RECYCLE_SECONDS,
    DEFAULT_POOL_SIZE,
)


class DatabaseConfig(BaseModel):
    """Relational store settings."""

    url: str = Field(
        default=DEFAULT_DATABASE_URL,
        description="SQLAlchemy async database URL (e.g. postgresql+asyncpg://...)",
    )
    pool_size: int = Field(default=DEFAULT_POOL_SIZE, ge=1, description="Connection pool size")
    max_overflow: int = Field(
        default=DEFAULT_MAX_OVERFLOW, ge=0, description="Connections allowed past pool_size"
    )
    pool_recycle: int = Field(
        default=DEFAULT_POOL_RECYCLE_SECONDS, description="Seconds before a pooled connection is recycled"
    )
    echo: bool = Field(default=False, description="Log every SQL statement via the sqlalchemy.engine logger")
    run_migrations: bool = Field(
        default=True, description="Apply pending schema migrations on startup"
    )

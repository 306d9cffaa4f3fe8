"""
Database engine construction and schema migrations.

Migrations are versioned and recorded in a ``schema_version`` table. Each
migration runs once, in order, inside the same transaction that records it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from sqlalchemy import Column, DateTime, Integer, MetaData, Table, Text, func, insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from config import DatabaseConfig

from .exceptions import StorageError
from .models import Plugin

logger = logging.getLogger(__name__)


# =============================================================================
# Engine
# =============================================================================


def create_engine(config: DatabaseConfig) -> AsyncEngine:
    """
    Create the shared async engine (and its connection pool).

    Args:
        config: Database settings

    Returns:
        AsyncEngine borrowed from by every store operation
    """
    # Statement echo is driven by the sqlalchemy.engine logger level, see setup_logging
    options: dict[str, Any] = {"pool_pre_ping": True}
    # SQLite pools do not take sizing arguments
    if not config.url.startswith("sqlite"):
        options.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_recycle=config.pool_recycle,
        )
    logger.debug("Creating database engine for %s", _redact(config.url))
    return create_async_engine(config.url, **options)


def _redact(url: str) -> str:
    """Hide the password portion of a database URL for logging."""
    scheme, sep, rest = url.partition("://")
    if not sep or "@" not in rest:
        return url
    credentials, _, host = rest.rpartition("@")
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


# =============================================================================
# Migrations
# =============================================================================

schema_metadata = MetaData()

schema_version = Table(
    "schema_version",
    schema_metadata,
    Column("version", Integer, primary_key=True, autoincrement=False),
    Column("applied_at", DateTime, server_default=func.now()),
    Column("description", Text),
)


@dataclass(frozen=True)
class Migration:
    version: int
    description: str
    apply: Callable[[Connection], None]


@dataclass(frozen=True)
class AppliedMigration:
    version: int
    description: str
    applied_at: datetime | None


def _create_plugins_table(connection: Connection) -> None:
    Plugin.__table__.create(connection, checkfirst=True)  # pyright: ignore[reportAttributeAccessIssue]


MIGRATIONS: list[Migration] = [
    Migration(1, "Create plugins table", _create_plugins_table),
    # Add more migrations here as needed
]


def get_current_version(connection: Connection) -> int:
    """Get the current schema version (0 when nothing has been applied)."""
    result = connection.execute(select(func.max(schema_version.c.version))).scalar()
    return result if result is not None else 0


def _apply_pending(connection: Connection, migrations: list[Migration]) -> int:
    schema_version.create(connection, checkfirst=True)
    current_version = get_current_version(connection)
    logger.debug("Current schema version: %d", current_version)

    applied_count = 0
    for migration in sorted(migrations, key=lambda m: m.version):
        if migration.version <= current_version:
            continue
        logger.info("Applying migration %d: %s", migration.version, migration.description)
        migration.apply(connection)
        connection.execute(
            insert(schema_version).values(
                version=migration.version, description=migration.description
            )
        )
        applied_count += 1

    if applied_count == 0:
        logger.info("No migrations to apply - database is up to date")
    else:
        logger.info("Applied %d migration(s) successfully", applied_count)
    return applied_count


async def migrate_up(engine: AsyncEngine, migrations: list[Migration] | None = None) -> int:
    """
    Apply all pending migrations.

    Args:
        engine: Engine to migrate
        migrations: Migration list override (defaults to MIGRATIONS)

    Returns:
        Number of migrations applied

    Raises:
        StorageError: If the database rejects a migration
    """
    try:
        async with engine.begin() as connection:
            return await connection.run_sync(
                _apply_pending, MIGRATIONS if migrations is None else migrations
            )
    except (SQLAlchemyError, OSError) as e:
        raise StorageError("migrate", e) from e


def _read_status(connection: Connection) -> list[AppliedMigration]:
    schema_version.create(connection, checkfirst=True)
    rows = connection.execute(
        select(
            schema_version.c.version,
            schema_version.c.description,
            schema_version.c.applied_at,
        ).order_by(schema_version.c.version)
    )
    return [
        AppliedMigration(version=row.version, description=row.description, applied_at=row.applied_at)
        for row in rows
    ]


async def migration_status(engine: AsyncEngine) -> list[AppliedMigration]:
    """
    List applied migrations in version order.

    Raises:
        StorageError: If the schema_version table cannot be read
    """
    try:
        async with engine.begin() as connection:
            return await connection.run_sync(_read_status)
    except (SQLAlchemyError, OSError) as e:
        raise StorageError("migration status", e) from e

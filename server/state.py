"""
Server-side state management.

One AppState is built per application lifespan and attached to
``app.state``; request handlers reach it through the dependencies in
server/dependencies.py rather than through module globals.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from config import Config
from core import PluginStore, create_engine, migrate_up

from .event_bus import BroadcastEventBus

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    config: Config
    engine: AsyncEngine
    store: PluginStore
    event_bus: BroadcastEventBus


async def open_state(config: Config) -> AppState:
    """
    Build the engine, store and event bus for one server process.

    Applies pending migrations first when enabled.
    """
    engine = create_engine(config.database)
    if config.database.run_migrations:
        await migrate_up(engine)

    event_bus = BroadcastEventBus(buffer_size=config.sse.event_buffer_size)
    logger.info(
        "Event bus ready (buffer %d, keep-alive %gs)",
        config.sse.event_buffer_size,
        config.sse.keep_alive_seconds,
    )
    return AppState(config=config, engine=engine, store=PluginStore(engine), event_bus=event_bus)


async def close_state(state: AppState) -> None:
    """Release pooled database connections."""
    await state.engine.dispose()
    logger.info("Database engine disposed")

"""
Shared pytest fixtures for all tests.
"""
import tempfile
from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine

from config import Config, DatabaseConfig, SSEConfig
from core import PluginStore, create_engine, migrate_up
from server import BroadcastEventBus, create_app


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def database_url(temp_dir: Path) -> str:
    """SQLite database file inside the temporary directory."""
    return f"sqlite+aiosqlite:///{temp_dir / 'plugins.db'}"


@pytest.fixture
def config(database_url: str) -> Config:
    """Config pointing at a fresh temporary database."""
    return Config(
        database=DatabaseConfig(url=database_url),
        sse=SSEConfig(keep_alive_seconds=600, event_buffer_size=10),
    )


@pytest_asyncio.fixture
async def engine(config: Config) -> AsyncIterator[AsyncEngine]:
    """Migrated engine for the temporary database."""
    engine = create_engine(config.database)
    await migrate_up(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(engine: AsyncEngine) -> PluginStore:
    return PluginStore(engine)


@pytest.fixture
def event_bus() -> BroadcastEventBus:
    return BroadcastEventBus(buffer_size=10)


@pytest.fixture
def client(config: Config) -> Iterator[TestClient]:
    """TestClient with the lifespan (engine, migrations, bus) running."""
    with TestClient(create_app(config)) as test_client:
        yield test_client

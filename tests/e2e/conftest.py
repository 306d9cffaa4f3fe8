"""
E2E test fixtures running the app under a real uvicorn server.

Uses httpx.AsyncClient for proper async SSE streaming; the in-process
TestClient buffers whole responses and cannot follow an open stream.
"""
import asyncio
import socket
from typing import AsyncGenerator

import pytest
import pytest_asyncio
import uvicorn

from config import Config, SSEConfig
from server import create_app


# =============================================================================
# Constants
# =============================================================================

SERVER_START_TIMEOUT_SECONDS = 10
E2E_KEEP_ALIVE_SECONDS = 0.3


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def e2e_config(config: Config) -> Config:
    """Test config with a keep-alive interval short enough to observe."""
    return Config(
        database=config.database,
        sse=SSEConfig(keep_alive_seconds=E2E_KEEP_ALIVE_SECONDS, keep_alive_text="keep-alive-text"),
    )


@pytest_asyncio.fixture
async def live_server(e2e_config: Config) -> AsyncGenerator[str, None]:
    """Serve the app on a free local port and yield its base URL."""
    port = _free_port()
    server = uvicorn.Server(
        uvicorn.Config(
            create_app(e2e_config),
            host="127.0.0.1",
            port=port,
            log_level="warning",
            timeout_graceful_shutdown=5,
        )
    )
    server_task = asyncio.create_task(server.serve())

    async def wait_started() -> None:
        while not server.started:
            await asyncio.sleep(0.05)

    await asyncio.wait_for(wait_started(), timeout=SERVER_START_TIMEOUT_SECONDS)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    await server_task

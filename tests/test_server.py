"""
Integration tests for the FastAPI server.
NO MOCKS - uses the real FastAPI TestClient against a temporary SQLite database.
"""
import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config import Config, DatabaseConfig
from server import create_app


def create(client: TestClient, description: str = "logger", wasm_url: str = "https://x/logger.wasm"):
    return client.post("/plugins", data={"description": description, "wasm_url": wasm_url})


class TestPages:
    """Test static pages and the stylesheet."""

    def test_home(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'hx-post="/plugins"' in response.text

    def test_stream_page(self, client):
        response = client.get("/stream")

        assert response.status_code == 200
        assert 'sse-connect="/plugins/stream"' in response.text

    def test_styles(self, client):
        response = client.get("/styles.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")
        assert ".plugin" in response.text


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "subscribers": 0}


class TestCreatePlugin:
    """Test POST /plugins."""

    def test_create_renders_fragment(self, client):
        """The created record is echoed with its generated id."""
        response = create(client)

        assert response.status_code == 200
        assert 'id="plugin-1"' in response.text
        assert "logger" in response.text
        assert "https://x/logger.wasm" in response.text

    def test_create_assigns_increasing_ids(self, client):
        create(client, "first")
        response = create(client, "second")

        assert 'id="plugin-2"' in response.text

    def test_create_accepts_empty_strings(self, client):
        response = create(client, "", "")

        assert response.status_code == 200
        assert 'id="plugin-1"' in response.text

    def test_create_escapes_html(self, client):
        response = create(client, "<script>alert(1)</script>")

        assert "<script>alert(1)</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_create_missing_field(self, client):
        """Missing form fields are rejected as bad input."""
        response = client.post("/plugins", data={"description": "no url"})

        assert response.status_code == 422
        assert "wasm_url" in response.text

    def test_create_publishes_to_subscriber(self, client):
        """A subscriber registered on the app's bus sees the Create event."""
        event_bus = client.app.state.plugin_feed.event_bus
        subscription = event_bus.subscribe()

        create(client)

        assert subscription.pending == 1
        subscription.close()


class TestListPlugins:
    """Test GET /plugins."""

    def test_list_empty(self, client):
        response = client.get("/plugins")

        assert response.status_code == 200
        assert 'class="plugin"' not in response.text

    def test_list_contains_created(self, client):
        create(client, "first", "https://x/1.wasm")
        create(client, "second", "https://x/2.wasm")

        response = client.get("/plugins")

        assert response.status_code == 200
        assert response.text.count('class="plugin"') == 2
        assert "https://x/1.wasm" in response.text
        assert "https://x/2.wasm" in response.text


class TestDeletePlugin:
    """Test DELETE /plugins/{id}."""

    def test_delete_removes_from_list(self, client):
        create(client)

        response = client.delete("/plugins/1")

        assert response.status_code == 200
        assert response.content == b""
        assert 'id="plugin-1"' not in client.get("/plugins").text

    def test_delete_twice(self, client):
        """Deleting an absent id still succeeds."""
        create(client)

        assert client.delete("/plugins/1").status_code == 200
        assert client.delete("/plugins/1").status_code == 200

    def test_create_after_delete_gets_new_id(self, client):
        create(client, "first")
        client.delete("/plugins/1")

        response = create(client, "second")

        assert 'id="plugin-2"' in response.text

    def test_delete_unknown_publishes_event(self, client):
        event_bus = client.app.state.plugin_feed.event_bus
        subscription = event_bus.subscribe()

        response = client.delete("/plugins/77")

        assert response.status_code == 200
        assert subscription.pending == 1
        subscription.close()

    def test_delete_non_integer_id(self, client):
        response = client.delete("/plugins/abc")

        assert response.status_code == 422


class TestStorageFailures:
    """Store failures map to 503 rather than crashing the request."""

    @pytest.fixture
    def broken_client(self, temp_dir: Path):
        """App whose database directory does not exist."""
        url = f"sqlite+aiosqlite:///{temp_dir / 'missing' / 'plugins.db'}"
        config = Config(database=DatabaseConfig(url=url, run_migrations=False))
        with TestClient(create_app(config)) as test_client:
            yield test_client

    def test_list_unavailable(self, broken_client):
        response = broken_client.get("/plugins")

        assert response.status_code == 503
        assert response.text == "Storage unavailable"

    def test_create_unavailable_publishes_nothing(self, broken_client):
        event_bus = broken_client.app.state.plugin_feed.event_bus
        subscription = event_bus.subscribe()

        response = create(broken_client)

        assert response.status_code == 503
        assert subscription.pending == 0
        subscription.close()

    def test_delete_unavailable(self, broken_client):
        response = broken_client.delete("/plugins/1")

        assert response.status_code == 503


class TestRequestLogging:
    """Test request logging middleware."""

    def test_success_logged_at_info(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="server.middleware"):
            client.get("/health")

        assert "GET /health -> 200" in caplog.text

    def test_client_error_logged_at_warning(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="server.middleware"):
            client.delete("/plugins/abc")

        records = [r for r in caplog.records if r.name == "server.middleware"]
        assert records[-1].levelno == logging.WARNING

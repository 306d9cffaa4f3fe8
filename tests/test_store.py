"""
Tests for the plugin record store against a real SQLite database.
"""

from pathlib import Path

import pytest

from config import DatabaseConfig
from core import PluginStore, StorageError, create_engine


class TestInsert:
    """Tests for PluginStore.insert."""

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self, store: PluginStore):
        """Inserted plugins come back with a generated id and their fields."""
        plugin = await store.insert("logger", "https://x/logger.wasm")

        assert plugin.id == 1
        assert plugin.description == "logger"
        assert plugin.wasm_url == "https://x/logger.wasm"

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, store: PluginStore):
        """Every insert gets an id distinct from all live records."""
        plugins = [await store.insert(f"plugin {n}", f"https://x/{n}.wasm") for n in range(5)]

        ids = [plugin.id for plugin in plugins]
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_empty_strings_accepted(self, store: PluginStore):
        plugin = await store.insert("", "")

        assert plugin.id is not None
        assert plugin.description == ""

    @pytest.mark.asyncio
    async def test_deleted_highest_id_not_reused(self, store: PluginStore):
        """A record created after deleting the newest one gets a fresh id."""
        first = await store.insert("a", "https://x/a.wasm")
        await store.delete_by_id(first.id)

        second = await store.insert("b", "https://x/b.wasm")

        assert second.id != first.id
        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_duplicate_descriptions_allowed(self, store: PluginStore):
        first = await store.insert("same", "https://x/a.wasm")
        second = await store.insert("same", "https://x/b.wasm")

        assert first.id != second.id


class TestList:
    """Tests for PluginStore.list_all."""

    @pytest.mark.asyncio
    async def test_empty(self, store: PluginStore):
        assert list(await store.list_all()) == []

    @pytest.mark.asyncio
    async def test_inserted_record_listed_once(self, store: PluginStore):
        """After insert, exactly one matching record is listed."""
        plugin = await store.insert("logger", "https://x/logger.wasm")

        plugins = await store.list_all()

        matches = [
            p for p in plugins
            if (p.id, p.description, p.wasm_url) == (plugin.id, "logger", "https://x/logger.wasm")
        ]
        assert len(matches) == 1


class TestDelete:
    """Tests for PluginStore.delete_by_id."""

    @pytest.mark.asyncio
    async def test_delete_removes_record(self, store: PluginStore):
        keep = await store.insert("keep", "https://x/keep.wasm")
        drop = await store.insert("drop", "https://x/drop.wasm")

        await store.delete_by_id(drop.id)

        ids = [plugin.id for plugin in await store.list_all()]
        assert ids == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_twice_succeeds(self, store: PluginStore):
        """Deleting an already-deleted id is a silent no-op."""
        plugin = await store.insert("once", "https://x/once.wasm")

        await store.delete_by_id(plugin.id)
        await store.delete_by_id(plugin.id)

        assert list(await store.list_all()) == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, store: PluginStore):
        await store.delete_by_id(999)


class TestStorageErrors:
    """Failures surface as StorageError."""

    @pytest.mark.asyncio
    async def test_missing_table(self, database_url: str):
        """Without migrations the table is absent and queries fail."""
        engine = create_engine(DatabaseConfig(url=database_url, run_migrations=False))
        try:
            with pytest.raises(StorageError) as exc_info:
                await PluginStore(engine).list_all()
            assert exc_info.value.operation == "list"
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_unreachable_database(self, temp_dir: Path):
        """A database file in a missing directory cannot be opened."""
        url = f"sqlite+aiosqlite:///{temp_dir / 'missing' / 'plugins.db'}"
        engine = create_engine(DatabaseConfig(url=url))
        try:
            with pytest.raises(StorageError) as exc_info:
                await PluginStore(engine).insert("x", "y")
            assert exc_info.value.operation == "insert"
            assert exc_info.value.cause is not None
        finally:
            await engine.dispose()

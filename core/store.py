"""
Plugin record store.

Thin accessor over the ``plugins`` table. Every operation borrows a pooled
connection through its own session and runs a single statement.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from .exceptions import StorageError
from .models import Plugin

logger = logging.getLogger(__name__)

# Errors surfaced by the driver or the pool; connection refusals arrive as OSError
_STORAGE_ERRORS = (SQLAlchemyError, OSError)


class PluginStore:
    """Reads and writes plugin records through a shared async engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    def _session(self) -> AsyncSession:
        return AsyncSession(self._engine, expire_on_commit=False)

    async def list_all(self) -> Sequence[Plugin]:
        """
        Return every stored plugin in natural storage order.

        Raises:
            StorageError: On connectivity or query failure
        """
        try:
            async with self._session() as session:
                result = await session.exec(select(Plugin))
                return result.all()
        except _STORAGE_ERRORS as e:
            raise StorageError("list", e) from e

    async def insert(self, description: str, wasm_url: str) -> Plugin:
        """
        Persist a new plugin and return it with its generated id.

        Raises:
            StorageError: If the write fails
        """
        plugin = Plugin(description=description, wasm_url=wasm_url)
        try:
            async with self._session() as session:
                session.add(plugin)
                await session.commit()
                await session.refresh(plugin)
        except _STORAGE_ERRORS as e:
            raise StorageError("insert", e) from e
        logger.debug("Inserted plugin %s", plugin.id)
        return plugin

    async def delete_by_id(self, plugin_id: int) -> None:
        """
        Delete the plugin with the given id.

        A missing id affects zero rows and is not an error.

        Raises:
            StorageError: If the statement fails
        """
        try:
            async with self._session() as session:
                result = await session.execute(delete(Plugin).where(col(Plugin.id) == plugin_id))
                await session.commit()
        except _STORAGE_ERRORS as e:
            raise StorageError("delete", e) from e
        logger.debug("Deleted plugin %d (%d row(s) affected)", plugin_id, result.rowcount)

"""
Plugin operations.

Each mutation runs against the store first and publishes exactly one
MutationEvent only after the store call succeeded.
"""

import logging
from collections.abc import Sequence

from .events import EventBus, MutationEvent, MutationKind, PublishResult
from .exceptions import StorageError
from .models import Plugin, PluginCreate
from .store import PluginStore

logger = logging.getLogger(__name__)


async def list_plugins(store: PluginStore) -> Sequence[Plugin]:
    """List all plugins."""
    return await store.list_all()


async def create_plugin(
    store: PluginStore, event_bus: EventBus, request: PluginCreate
) -> Plugin:
    """
    Create a plugin and announce it.

    Args:
        store: Record store
        event_bus: Bus that receives the Create event
        request: Description and WASM URL of the new plugin

    Returns:
        The stored plugin, including its generated id

    Raises:
        StorageError: If the insert fails (no event is published)
    """
    plugin = await store.insert(request.description, request.wasm_url)
    if plugin.id is None:
        raise StorageError("insert")

    result = _notify(event_bus, MutationEvent(mutation_kind=MutationKind.CREATE, id=plugin.id))
    if not result.has_listeners:
        logger.warning(
            "Record with ID %d was created but nobody's listening to the stream", plugin.id
        )
    else:
        logger.info("Plugin created: %d", plugin.id)
    return plugin


async def delete_plugin(store: PluginStore, event_bus: EventBus, plugin_id: int) -> None:
    """
    Delete a plugin and announce it.

    Existence is not checked: deleting an absent id still publishes a
    Delete event for that id.

    Raises:
        StorageError: If the delete fails (no event is published)
    """
    await store.delete_by_id(plugin_id)

    result = _notify(event_bus, MutationEvent(mutation_kind=MutationKind.DELETE, id=plugin_id))
    if not result.has_listeners:
        logger.warning(
            "Record with ID %d was deleted but nobody's listening to the stream", plugin_id
        )
    else:
        logger.info("Plugin deleted: %d", plugin_id)


def _notify(event_bus: EventBus, event: MutationEvent) -> PublishResult:
    result = event_bus.publish(event)
    logger.debug(
        "Published %s %d to %d subscriber(s)", event.mutation_kind.value, event.id, result.delivered
    )
    return result

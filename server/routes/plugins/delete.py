"""
Delete plugin endpoint.
"""

import logging

from fastapi import APIRouter, Response

from core import delete_plugin

from ...dependencies import EventBus, Store
from ...logging_config import log_timing

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete("/plugins/{plugin_id}")
async def delete_plugin_route(plugin_id: int, store: Store, event_bus: EventBus) -> Response:
    """Delete a plugin. Absent ids succeed the same way."""
    with log_timing(logger, "Plugin delete"):
        await delete_plugin(store, event_bus, plugin_id)
    return Response(status_code=200)

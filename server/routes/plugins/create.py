"""
Create plugin endpoint.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from core import create_plugin

from ...dependencies import EventBus, Store
from ...logging_config import log_timing
from ...requests import CreatePluginRequest, parse_create_plugin_form
from ...views import render_plugin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/plugins", response_class=HTMLResponse)
async def create_plugin_route(
    request: Request,
    form: Annotated[CreatePluginRequest, Depends(parse_create_plugin_form)],
    store: Store,
    event_bus: EventBus,
) -> HTMLResponse:
    """Store a new plugin, announce it, and render it as a fragment."""
    with log_timing(logger, "Plugin insert"):
        plugin = await create_plugin(store, event_bus, form.to_create())
    return render_plugin(request, plugin)

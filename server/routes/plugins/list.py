"""
List plugins endpoint.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from core import list_plugins

from ...dependencies import Store
from ...logging_config import log_timing
from ...views import render_plugin_list

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/plugins", response_class=HTMLResponse)
async def list_plugins_route(request: Request, store: Store) -> HTMLResponse:
    """Render every stored plugin as an HTML fragment."""
    with log_timing(logger, "Plugin list query"):
        plugins = await list_plugins(store)
    return render_plugin_list(request, plugins)

"""
Plugin feed HTTP server.

Serves the plugin pages and fragments, the mutation endpoints and the
live SSE stream of plugin changes.
"""

from .app import create_app
from .event_bus import BroadcastEventBus, Subscription
from .state import AppState

__all__ = ["create_app", "AppState", "BroadcastEventBus", "Subscription"]

"""
Domain models for the plugin feed.

The Plugin table model is shared by the store and the view layer.
"""

from .plugin import Plugin, PluginBase, PluginCreate

__all__ = [
    "Plugin",
    "PluginBase",
    "PluginCreate",
]

"""
Core business logic package.

This package contains the transport-agnostic plugin store, mutation events
and operations. The server package provides HTTP bindings around them.
"""

from .database import MIGRATIONS, AppliedMigration, Migration, create_engine, migrate_up, migration_status
from .events import EventBus, MutationEvent, MutationKind, NullEventBus, PublishResult
from .exceptions import CoreError, StorageError, StreamLagError
from .models import Plugin, PluginCreate
from .plugins import create_plugin, delete_plugin, list_plugins
from .store import PluginStore

__all__ = [
    # Exceptions
    "CoreError",
    "StorageError",
    "StreamLagError",
    # Events
    "MutationKind",
    "MutationEvent",
    "PublishResult",
    "EventBus",
    "NullEventBus",
    # Models
    "Plugin",
    "PluginCreate",
    # Storage
    "PluginStore",
    "create_engine",
    "migrate_up",
    "migration_status",
    "Migration",
    "AppliedMigration",
    "MIGRATIONS",
    # Plugin operations
    "list_plugins",
    "create_plugin",
    "delete_plugin",
]

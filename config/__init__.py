"""
Configuration module for the plugin feed server.

Exports the configuration models and loader functions used throughout the application.
"""

from .database_config import DatabaseConfig
from .defaults import DEFAULT_KEEP_ALIVE_SECONDS, DEFAULT_KEEP_ALIVE_TEXT
from .loader import apply_env_overrides, get_config, load_config, load_config_file, merge_configs, strip_jsonc_comments
from .main_config import Config
from .server_config import ServerConfig
from .sse_config import SSEConfig

__all__ = [
    # Constants
    "DEFAULT_KEEP_ALIVE_SECONDS",
    "DEFAULT_KEEP_ALIVE_TEXT",
    # Config models
    "Config",
    "ServerConfig",
    "DatabaseConfig",
    "SSEConfig",
    # Loader functions
    "load_config",
    "get_config",
    "load_config_file",
    "merge_configs",
    "apply_env_overrides",
    "strip_jsonc_comments",
]

"""Default configuration values."""

# Server
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_CORS_ORIGINS = "*"

# Database
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./plugins.db"
DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 10
DEFAULT_POOL_RECYCLE_SECONDS = 3600

# Server-sent events
DEFAULT_KEEP_ALIVE_SECONDS = 600.0
DEFAULT_KEEP_ALIVE_TEXT = "keep-alive-text"
DEFAULT_EVENT_BUFFER_SIZE = 10  # Per-subscriber, oldest events are dropped past this

# Logging
DEFAULT_LOG_LEVEL = "INFO"

# Config file discovery
CONFIG_FILENAMES = ("plugin-feed.jsonc", "plugin-feed.json")
PROJECT_CONFIG_DIR = ".plugin-feed"
GLOBAL_CONFIG_DIR = ".plugin-feed"
CONFIG_DIR_FILENAME = "config.jsonc"

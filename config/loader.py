"""Configuration loading utilities."""

import json
import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from .defaults import (
    CONFIG_DIR_FILENAME,
    CONFIG_FILENAMES,
    DEFAULT_CORS_ORIGINS,
    GLOBAL_CONFIG_DIR,
    PROJECT_CONFIG_DIR,
)
from .main_config import Config

logger = logging.getLogger(__name__)

# Environment variable -> dotted config path
ENV_OVERRIDES: dict[str, str] = {
    "HOST": "server.host",
    "PORT": "server.port",
    "CORS_ORIGINS": "server.cors_origins",
    "DATABASE_URL": "database.url",
    "DATABASE_ECHO": "database.echo",
    "RUN_MIGRATIONS": "database.run_migrations",
    "SSE_KEEP_ALIVE_SECONDS": "sse.keep_alive_seconds",
    "SSE_KEEP_ALIVE_TEXT": "sse.keep_alive_text",
    "SSE_EVENT_BUFFER_SIZE": "sse.event_buffer_size",
    "SSE_CLOSE_ON_LAG": "sse.close_on_lag",
    "LOG_LEVEL": "log_level",
}


_JSONC_TOKEN = re.compile(
    r'(?P<string>"(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/',
    re.DOTALL,
)


def strip_jsonc_comments(content: str) -> str:
    """
    Strip comments from JSONC content to convert to valid JSON.

    Handles:
    - Single-line comments: // comment
    - Multi-line comments: /* comment */

    Args:
        content: JSONC content string

    Returns:
        JSON string with comments removed
    """
    # String literals are matched first and kept, so "//" or "/*" inside a value survives
    return _JSONC_TOKEN.sub(lambda match: match.group("string") or "", content)


def load_config_file(path: Path) -> dict[str, Any] | None:
    """
    Load a config file from the given path.

    Supports both .json and .jsonc files with comment stripping.

    Args:
        path: Path to the config file

    Returns:
        Parsed config dictionary or None if file doesn't exist or is invalid
    """
    if not path.exists():
        return None

    try:
        content = path.read_text()
        if path.suffix == ".jsonc":
            content = strip_jsonc_comments(content)
        return json.loads(content)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return None


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configuration dictionaries.

    Args:
        base: Base configuration
        override: Override configuration (takes precedence)

    Returns:
        Merged configuration dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def _set_dotted(data: dict[str, Any], dotted: str, value: Any) -> None:
    *parents, leaf = dotted.split(".")
    target = data
    for part in parents:
        target = target.setdefault(part, {})
    target[leaf] = value


def apply_env_overrides(
    config_data: dict[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """
    Overlay environment variables onto file-based configuration.

    Values are passed through as strings; pydantic coerces them when the
    Config model is built. CORS_ORIGINS is split on commas.

    Args:
        config_data: Configuration loaded from files
        environ: Environment mapping (defaults to os.environ)

    Returns:
        New configuration dictionary with overrides applied
    """
    environ = os.environ if environ is None else environ
    result = merge_configs({}, config_data)

    for env_name, dotted in ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        value: Any = raw
        if env_name == "CORS_ORIGINS":
            value = (
                [origin.strip() for origin in raw.split(",") if origin.strip()]
                if raw != DEFAULT_CORS_ORIGINS
                else [DEFAULT_CORS_ORIGINS]
            )
        _set_dotted(result, dotted, value)

    return result


def load_config(
    project_root: Path | None = None, environ: Mapping[str, str] | None = None
) -> Config:
    """
    Load configuration from multiple sources with precedence.

    Looks for config files in the following order:
    1. Project-level: plugin-feed.jsonc, plugin-feed.json, .plugin-feed/config.jsonc
    2. Global: ~/.plugin-feed/config.jsonc

    Project config is merged over global config, and environment variables
    take precedence over both.

    Args:
        project_root: Project root directory (defaults to current working directory)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Loaded and merged Config model
    """
    if project_root is None:
        project_root = Path.cwd()

    global_config_path = Path.home() / GLOBAL_CONFIG_DIR / CONFIG_DIR_FILENAME
    config_data = load_config_file(global_config_path) or {}

    project_config_paths = [project_root / name for name in CONFIG_FILENAMES]
    project_config_paths.append(project_root / PROJECT_CONFIG_DIR / CONFIG_DIR_FILENAME)

    for path in project_config_paths:
        project_config = load_config_file(path)
        if project_config:
            logger.debug("Loaded project config from %s", path)
            config_data = merge_configs(config_data, project_config)
            break

    config_data = apply_env_overrides(config_data, environ)
    return Config(**config_data)


@lru_cache(maxsize=1)
def get_config(project_root: Path | None = None) -> Config:
    """
    Get cached configuration.

    To reload the config, clear the cache with get_config.cache_clear().

    Args:
        project_root: Project root directory (defaults to current working directory)

    Returns:
        Cached Config model
    """
    return load_config(project_root)

"""Logging setup for the plugin feed server.

Everything goes through the standard library root logger. SQL statement
logging is not enabled on the engine itself; ``database.echo`` raises the
``sqlalchemy.engine`` logger to INFO so statements share the same handler
and format as application records.
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Generator

from config.defaults import DEFAULT_LOG_LEVEL

SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
)

SQL_LOGGER = "sqlalchemy.engine"

# Libraries that log per connection or per frame
QUIET_LOGGERS = ("aiosqlite", "asyncpg", "sse_starlette", "uvicorn.access")

# Store calls slower than this are logged at WARNING
SLOW_OPERATION_THRESHOLD_MS = 500.0


def setup_logging(level: str = DEFAULT_LOG_LEVEL, sql_echo: bool = False) -> None:
    """Configure the root logger for the server process.

    Args:
        level: Application log level name (unknown names fall back to INFO)
        sql_echo: Log every SQL statement through ``sqlalchemy.engine``
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    fmt = DETAILED_FORMAT if log_level == logging.DEBUG else SIMPLE_FORMAT

    logging.basicConfig(
        level=log_level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)


@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    slow_ms: float = SLOW_OPERATION_THRESHOLD_MS,
) -> Generator[None, None, None]:
    """Time a store operation.

    Logs at DEBUG normally, or at WARNING once the operation took longer
    than ``slow_ms``. The timing is logged even when the block raises.

    Example:
        with log_timing(logger, "Plugin list query"):
            plugins = await list_plugins(store)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        if duration_ms > slow_ms:
            logger.warning("%s took %.1fms SLOW", operation, duration_ms)
        else:
            logger.debug("%s completed in %.1fms", operation, duration_ms)

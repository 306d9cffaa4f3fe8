"""
Plugin feed server entry point.
"""
import logging

import uvicorn

from config import get_config
from server import create_app
from server.logging_config import setup_logging


def main() -> None:
    """Start the server on the configured host and port."""
    config = get_config()

    # Initialize logging before anything else
    setup_logging(config.log_level, sql_echo=config.database.echo)
    logger = logging.getLogger(__name__)

    app = create_app(config)

    logger.info("Server listening on %s:%d", config.server.host, config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()

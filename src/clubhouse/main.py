"""Command-line entry point: `clubhouse` starts the web server."""

from urllib.parse import urlparse

import structlog

from clubhouse.app import App
from clubhouse.config import Config
from clubhouse.logging import setup_logging
from clubhouse.web.runner import run_server

logger = structlog.get_logger(__name__)


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    logger.info(
        "clubhouse_starting",
        database=urlparse(config.database_url).path[1:],
        photos_path=config.photos_path,
        bootstrap_admin=config.bootstrap_admin,
    )
    run_server(App(config), config)


if __name__ == "__main__":
    main()

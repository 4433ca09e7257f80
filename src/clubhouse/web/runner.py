"""Uvicorn runner for the Clubhouse web app."""

import uvicorn

from clubhouse.app import App
from clubhouse.config import Config
from clubhouse.web.server import create_fastapi_app


def run_server(app: App, config: Config) -> None:
    """Serve the app with uvicorn. Logging is left to setup_logging."""
    fastapi_app = create_fastapi_app(app, config)

    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=None,
        log_level="debug" if config.debug else "info",
        access_log=True,
        # Behind a reverse proxy the client address comes from X-Forwarded-For
        proxy_headers=True,
        server_header=False,
    )

"""Entry point for the HTTP server."""
from __future__ import annotations

import logging
import sys

import uvicorn

from .config import Settings, load_settings
from .exceptions import ConfigurationError
from .main import create_app

LOGGER = logging.getLogger(__name__)


def resolve_port(settings: Settings) -> int:
    """Return the listen port, refusing to start when ``PORT`` is unset."""

    if settings.port is None:
        raise ConfigurationError("PORT is not set")
    return settings.port


def main() -> None:
    """Validate configuration, build the application and serve it with uvicorn."""

    settings = load_settings()
    try:
        port = resolve_port(settings)
    except ConfigurationError as exc:
        LOGGER.critical("Cannot start server: %s", exc)
        sys.exit(1)

    app = create_app(settings)
    LOGGER.info("Server is running on port %s", port)
    uvicorn.run(app, host=settings.host, port=port, log_config=None)


if __name__ == "__main__":
    main()

"""Serve the Social Media API with uvicorn.

Host, port and log level come from ``Settings`` (``HOST``, ``PORT``,
``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
from uvicorn import Config, Server

from social_media_api.app.core.config import settings


def main() -> None:
    """Start the API server and block until it exits."""
    config = Config(
        app="social_media_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass

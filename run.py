"""Entry point for the Project Tracker API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example in Docker,
where you only specify a single Python file to run.

Configuration is read from environment variables; see
``project_tracker_api/app/core/config.py`` for the full list.  ``HOST``
and ``PORT`` choose the bind address (defaults ``0.0.0.0`` and
``3000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from project_tracker_api.app.core.config import settings
from project_tracker_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("API listening at http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

"""
Main entrypoint for the Project Tracker API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn project_tracker_api.app.main:app --reload

or through ``run.py`` at the repository root.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import TrackerError
from .core.logging_config import setup_logging
from .core.store import init_store

logger = logging.getLogger(__name__)


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    """Render a domain error as ``{"message": ...}`` with its status code."""
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds its own store, so separate applications never
    share data.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this instance.  The module-level settings
        read from the environment are used when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store can
    # log while seeding.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = init_store(settings)

    app.add_exception_handler(TrackerError, tracker_error_handler)

    # Mount versioned routes.  Additional versions can be added later by
    # including their respective routers with a different prefix.
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info(
        "Created %s %s (id strategy: %s)",
        settings.project_name,
        settings.api_version,
        settings.id_strategy,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

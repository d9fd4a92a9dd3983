"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application: logging, error handlers
and the versioned router.  ``create_app`` builds the app, which is then
instantiated at module import time as ``app`` so it can be served with::

    uvicorn social_media_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging


def create_app(initialize_db: bool = True, database_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    initialize_db : bool
        Create the tables on startup.  Tests that manage their own
        database pass ``False``.
    database_path : Optional[str]
        Database file to use instead of the configured one.  Stored on
        ``app.state`` so request handlers connect to the same file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup messages are formatted.
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if initialize_db:
            init_db(app.state.database_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database_path = database_path or get_database_path()
    register_error_handlers(app)
    app.include_router(v1_router)
    return app


app = create_app()

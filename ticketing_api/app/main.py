"""
Main entrypoint for the Event Ticketing API.

``create_app`` builds and configures the FastAPI application, which
is instantiated at import time as ``app`` so it can be served with::

    uvicorn ticketing_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import ApiError, api_error_handler
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the v1 routes under ``/api/v1``,
    registers the JSON renderer for ``ApiError`` and creates the
    database schema on start-up.
    """
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")
    app.add_exception_handler(ApiError, api_error_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    return app


app = create_app()

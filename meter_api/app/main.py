"""
Main entrypoint for the Meter API.

This module assembles the FastAPI application, sets up logging, error
handlers and the in-memory store, and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn meter_api.app.main:app --reload

The application title, version and route prefix come from ``Settings``
in ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import MeterStore
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application gets its own ``MeterStore``, seeded with the demo
    meters when ``settings.seed_fixtures`` is true.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = MeterStore.with_fixtures() if settings.seed_fixtures else MeterStore()
    logger.info("Meter store ready with %d meters", len(app.state.store))

    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "root."

    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

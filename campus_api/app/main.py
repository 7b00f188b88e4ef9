"""
Main entrypoint for the Campus Resources API.

This module assembles the FastAPI application, sets up logging,
registers the error envelope handlers and includes the versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.
Importing the app here makes it easy to run with uvicorn, e.g.::

    uvicorn campus_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Mapping, Optional

from fastapi import FastAPI

from .api.v1.router import RESOURCES
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.logging_config import configure_logging
from .repositories import Repository, SqliteRepository
from .services.resource_service import ResourceService

logger = logging.getLogger(__name__)


def create_app(repositories: Optional[Mapping[str, Repository]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repositories : Optional[Mapping[str, Repository]]
        Repositories keyed by resource kind (e.g. ``"HelpRequest"``).
        When omitted, every resource is backed by a ``SqliteRepository``
        and the database migrations run at startup.  Kinds missing
        from a supplied mapping also fall back to SQLite.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the startup
    # below can log.
    configure_logging(settings.log_level, settings.log_file or None)

    repositories = dict(repositories or {})
    uses_sqlite = False
    services = {}
    for definition in RESOURCES:
        repository = repositories.get(definition.kind)
        if repository is None:
            uses_sqlite = True
            repository = SqliteRepository(definition.table, definition.record_model, definition.key_field)
        services[definition.kind] = ResourceService(
            definition.kind,
            definition.record_model,
            repository,
            key_field=definition.key_field,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Create the database file if needed and bring the schema up to date.
        if uses_sqlite:
            init_db()
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.services = services
    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

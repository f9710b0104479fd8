"""
Main entrypoint for the Event Manager API.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and registers the API documentation groups.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn learn.event.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.swagger_config import configure_documentation


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the set‑up steps
    # below can log.
    setup_logging(app_settings.log_level, app_settings.log_file)

    # FastAPI's own document is served at the documentation root; the
    # per‑group documents and Swagger UI are added by the documentation
    # host, so the built‑in UIs are disabled.
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        description=app_settings.description,
        debug=app_settings.debug,
        openapi_url=app_settings.api_docs_path if app_settings.docs_enabled else None,
        docs_url=None,
        redoc_url=None,
    )

    app.include_router(v1_router, prefix="/api/v1")

    configure_documentation(app, app_settings)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""
FastAPI application for the blood donation record service.

``app`` serves the donation collection under
``<API_PREFIX>/bloodbank`` and a health check under
``<API_PREFIX>/health``.  It holds a single process-wide entry store,
so run one worker process, e.g.::

    uvicorn blood_bank_api.app.main:app --workers 1
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Build the donation record service with logging configured from ``settings``."""
    # Logging first so that router imports can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The collection itself is served from ``<api_prefix>/bloodbank``.
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Module-level instance picked up by uvicorn and run.py.
app = create_app()

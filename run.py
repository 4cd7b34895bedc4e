"""Entry point for the Blood Bank API.

Launches the FastAPI application with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables through
``Settings``; defaults are ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blood_bank_api.app.core.config import settings
from blood_bank_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

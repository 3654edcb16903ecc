"""Entry point for the Ride Sheets API.

Starts the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example in Docker or on a PaaS
where you only specify a single Python file to run.

Configuration (spreadsheet id, sheet name, credentials, port) is read
from environment variables; see ``ride_sheets_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from ride_sheets_api.app.core.config import settings
from ride_sheets_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted.

    Host and port come from the ``HOST`` and ``PORT`` environment
    variables.  Defaults are ``0.0.0.0`` and ``3001``.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Starting backend server on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

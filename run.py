"""Entry point for the Meter API.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Application configuration (log level, route prefix, fixtures) is read
from environment variables, see ``meter_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import os
from uvicorn import Config, Server


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `METER_HOST` and
    `METER_PORT`. Defaults are `0.0.0.0` and `3333`.
    """
    host = os.getenv("METER_HOST", "0.0.0.0")
    port = int(os.getenv("METER_PORT", "3333"))
    # Import string so uvicorn sets up its loggers before the app is built.
    config = Config(app="meter_api.app.main:app", host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for serving the Campus Resources API.

Host and port are read from the environment variables ``API_HOST``
and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``).  All other
configuration (``DATABASE_URL``, ``SECRET_KEY``, ``ADMIN_EMAILS``,
``LOG_LEVEL`` ...) is read by ``campus_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from campus_api.app.main import app


async def main() -> None:
    """Serve the API with Uvicorn until interrupted."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

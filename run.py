"""Entry point for serving the Blog API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3001``); every other setting is
described in ``blog_api.app.core.config``.  Variables may also be
placed in the environment by the process manager (Docker, systemd).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from blog_api.app.core.config import settings


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app="blog_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for the Blog API server.

Builds the FastAPI application and serves it with Uvicorn.  The TCP
port is the one setting that normally needs changing; host, port and
log level default to the values from ``Settings`` (and thus from the
``HOST``, ``PORT`` and ``LOG_LEVEL`` environment variables) and can be
overridden on the command line.

Usage:
    python run.py --port 8080
"""
import argparse
import asyncio
import dataclasses
import logging
from typing import List, Optional

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.core.logging_config import setup_logging
from blog_api.app.main import create_app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the in-memory blog API.")
    ap.add_argument("--host", default=settings.host, help=f"Interface to bind (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"TCP port to bind (default: {settings.port})")
    ap.add_argument("--log-level", default=settings.log_level, help=f"Logging level (default: {settings.log_level})")
    return ap.parse_args(argv)


async def serve(host: str, port: int, log_level: str) -> None:
    """Start the API using Uvicorn and run until interrupted."""
    app_settings = dataclasses.replace(settings, host=host, port=port, log_level=log_level)
    # Importing ``blog_api.app.main`` already configured logging with the
    # defaults.
    setup_logging(app_settings.log_level, app_settings.log_file, force=True)
    app = create_app(app_settings)
    # log_config=None leaves uvicorn's loggers propagating to our root handlers.
    config = Config(app=app, host=host, port=port, reload=False, log_config=None, log_level=log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving blog API on %s:%s", host, port)
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    asyncio.run(serve(args.host, args.port, args.log_level))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for the Whisky API server.

Builds the application with a freshly seeded store and serves it with
Uvicorn.  Settings come from environment variables (``HTTP_HOST``,
``HTTP_PORT``, ``LOG_LEVEL``, ``ASSETS_DIR``) and may be overridden by
a JSON configuration file passed with ``--conf``, for example
``{"http.port": 8081}``.

Usage:
    python run.py [--conf config.json] [--host HOST] [--port PORT]
"""
import argparse
import asyncio
import logging
from dataclasses import replace

from uvicorn import Config, Server

from whisky_api.app.core.config import load_settings
from whisky_api.app.main import create_app


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Whisky API server")
    parser.add_argument("--conf", help="Path to a JSON configuration file")
    parser.add_argument("--host", help="Interface to bind (overrides http.host)")
    parser.add_argument("--port", type=int, help="Port to listen on (overrides http.port)")
    return parser.parse_args(argv)


async def main(argv=None) -> None:
    """Build the app and serve it until interrupted."""
    args = parse_args(argv)
    settings = load_settings(args.conf)
    if args.host:
        settings = replace(settings, http_host=args.host)
    if args.port:
        settings = replace(settings, http_port=args.port)

    app = create_app(settings=settings)
    logging.getLogger("whisky_api.run").info(
        "Starting %s on %s:%s", settings.project_name, settings.http_host, settings.http_port
    )
    config = Config(
        app=app,
        host=settings.http_host,
        port=settings.http_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

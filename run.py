"""Unified entry point for the weather proxy and the product service.

This script launches both services concurrently in one process, each
on its own port.  Pass ``weather`` or ``products`` to start only one
of them.

Host, ports, log level and the weather API key are read from the
environment; see ``rest_services/app/core/config.py`` for the list of
supported variables.

Usage:
    python run.py [all|weather|products]
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from rest_services.app.core.config import settings
from rest_services.app.core.logging_config import build_logging_config, setup_logging


async def serve(app: str, port: int) -> None:
    """Serve the ASGI application at import path ``app`` with Uvicorn."""
    log_config = build_logging_config(settings.log_level, settings.log_file or None)
    config = Config(app=app, host=settings.host, port=port, reload=False, log_config=log_config)
    server = Server(config)
    await server.serve()


async def main(which: str) -> None:
    """Run the selected services concurrently."""
    setup_logging(settings.log_level, settings.log_file or None)
    tasks = []
    if which in ("all", "weather"):
        tasks.append(asyncio.create_task(serve("rest_services.app.main:weather_app", settings.weather_port)))
    if which in ("all", "products"):
        tasks.append(asyncio.create_task(serve("rest_services.app.main:products_app", settings.products_port)))
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the weather proxy and/or the product service.")
    parser.add_argument("service", nargs="?", default="all", choices=["all", "weather", "products"])
    args = parser.parse_args()
    try:
        asyncio.run(main(args.service))
    except (KeyboardInterrupt, SystemExit):
        pass

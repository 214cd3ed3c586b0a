"""
Application factories for the weather proxy and the product service.

Each factory sets up logging, builds a FastAPI application and stores
the objects its handlers depend on (the weather client or the product
repository) on ``app.state``.  Module-level instances are created at
import time so that uvicorn can serve them directly, e.g.::

    uvicorn rest_services.app.main:products_app --port 8081
    uvicorn rest_services.app.main:weather_app --port 8080

Both instances are also started together by ``run.py``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import products_router, weather_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.product_repository import InMemoryProductRepository, ProductRepository
from .services.weather_service import WeatherService


logger = logging.getLogger(__name__)


def create_weather_app(
    settings: Optional[Settings] = None,
    weather_service: Optional[WeatherService] = None,
) -> FastAPI:
    """Create the weather proxy application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-based
        ``settings`` instance.
    weather_service : Optional[WeatherService]
        Upstream client to use.  If omitted one is built from
        ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if weather_service is None:
        if not settings.weather_api_key:
            logger.warning("WEATHER_API_KEY is not set; upstream weather requests will be rejected")
        weather_service = WeatherService(
            api_url=settings.weather_api_url,
            api_key=settings.weather_api_key,
            timeout=settings.weather_timeout or None,
        )

    app = FastAPI(
        title=f"{settings.project_name}: weather proxy",
        version=settings.api_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.weather_service = weather_service
    app.include_router(weather_router)
    return app


def create_products_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create the product service application.

    A fresh ``InMemoryProductRepository`` seeded with the default
    products is used unless ``repository`` is given.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=f"{settings.project_name}: products",
        version=settings.api_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.product_repository = repository if repository is not None else InMemoryProductRepository()
    register_error_handlers(app)
    app.include_router(products_router)
    return app


# Create the application instances at import time so that tools such as
# uvicorn can discover them without calling the factories manually.
weather_app = create_weather_app()
products_app = create_products_app()

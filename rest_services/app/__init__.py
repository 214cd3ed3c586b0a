"""
Application package initializer.

The package is split into ``core`` (configuration, logging, error
rendering), ``api`` (routers and endpoints), ``schemas`` (Pydantic
models) and ``services`` (business logic and storage).  The weather
proxy and the product service share this layout but not their routes
or state.
"""

from .main import products_app, weather_app  # noqa: F401

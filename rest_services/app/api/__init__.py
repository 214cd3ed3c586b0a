"""
API package containing the routers of both services.

``router.py`` exposes ``weather_router`` and ``products_router``; the
endpoint modules they include live in ``endpoints``.
"""

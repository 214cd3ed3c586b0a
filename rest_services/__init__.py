"""
Top-level package for the REST services.

Functionality lives in the ``app`` subpackage: the weather proxy and
the in-memory product service, each exposed as its own FastAPI
application in ``rest_services.app.main``.
"""

__all__ = []

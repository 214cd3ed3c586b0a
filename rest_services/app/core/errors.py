"""
Error rendering for the product service.

Handlers raise ``HTTPException`` with a human readable ``detail``.  The
handler registered here turns every such exception, including the 404
and 405 responses FastAPI produces for unknown paths and methods, into
a ``{"error": "<msg>"}`` JSON body with the same status code.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Keep headers such as ``Allow`` on 405 responses.
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handler to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

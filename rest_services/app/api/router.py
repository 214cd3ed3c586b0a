"""
Top-level routers for both services.

Each service gets its own router so the two applications share no
routes.  When new endpoints are added, include them in the router of
the service that owns them.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .endpoints import products, weather

weather_router = APIRouter()
weather_router.include_router(weather.router, tags=["weather"])

products_router = APIRouter()
products_router.include_router(products.router, prefix="/products", tags=["products"])


@products_router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Hey!"

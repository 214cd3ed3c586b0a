"""
Weather proxy endpoints.

``GET /weather/{city}`` forwards the city to the upstream weather API
and returns only its name and temperature.  The handlers are plain
functions so FastAPI runs the blocking upstream call in its thread
pool instead of on the event loop.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from rest_services.app.api.deps import get_weather_service
from rest_services.app.schemas.weather import WeatherData
from rest_services.app.services.weather_service import WeatherLookupError, WeatherService

router = APIRouter()


@router.get("/hello", response_class=PlainTextResponse)
def hello() -> str:
    return "Hello World!"


@router.get(
    "/weather/{city}",
    response_model=WeatherData,
    responses={500: {"description": "Upstream failure", "content": {"text/plain": {}}}},
)
def get_weather(city: str, service: WeatherService = Depends(get_weather_service)):
    """Return ``{"name", "main": {"temp"}}`` for ``city``.

    Any upstream error is reported as a 500 with the error text as a
    plain-text body.
    """
    try:
        return service.query_weather(city)
    except WeatherLookupError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

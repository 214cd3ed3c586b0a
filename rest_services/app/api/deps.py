"""
FastAPI dependencies shared by the endpoints.

The application factories store the product repository and the weather
service on ``app.state``; these helpers hand them to route functions
through ``Depends`` so tests can swap them per application.
"""

from fastapi import Depends, Request

from rest_services.app.services.product_repository import ProductRepository
from rest_services.app.services.product_service import ProductService
from rest_services.app.services.weather_service import WeatherService


def get_product_repository(request: Request) -> ProductRepository:
    return request.app.state.product_repository


def get_product_service(repository: ProductRepository = Depends(get_product_repository)) -> ProductService:
    return ProductService(repository)


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service

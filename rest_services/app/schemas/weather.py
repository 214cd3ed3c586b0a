"""
Pydantic models for weather data.

Only the city name and the current temperature in Kelvin are kept from
the upstream response; every other field is ignored on decode.  The
models serialize back to the upstream shape,
``{"name": ..., "main": {"temp": ...}}``.
"""

from pydantic import BaseModel, ConfigDict, Field


class WeatherMain(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    temperature_kelvin: float = Field(0.0, alias="temp")


class WeatherData(BaseModel):
    name: str = Field("", examples=["London"])
    main: WeatherMain = Field(default_factory=WeatherMain)

    @property
    def temperature_kelvin(self) -> float:
        return self.main.temperature_kelvin

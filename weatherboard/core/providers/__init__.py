from .base import RequestConfig, UpstreamClient
from .openweather import OpenWeatherClient
from .restcountries import RestCountriesClient

__all__ = ["RequestConfig", "UpstreamClient", "OpenWeatherClient", "RestCountriesClient"]

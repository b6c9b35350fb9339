from .country_service import CountryLookupService
from .weather_service import WeatherLookupService

__all__ = ["CountryLookupService", "WeatherLookupService"]

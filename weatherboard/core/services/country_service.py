"""Country directory lookup with indefinite caching."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, List, Optional

import logging

from django.core.cache.backends.base import BaseCache

from weatherboard.core.abstractions import Country, CountryDirectory
from weatherboard.core.errors import UpstreamError
from weatherboard.core.schemas import parse_country


logger = logging.getLogger(__name__)


class CountryLookupService:
    """Fetch the country directory once and keep only complete records."""

    cache_key = "countries:all"

    def __init__(
        self,
        directory: CountryDirectory,
        cache: BaseCache,
        ttl: Optional[int] = None,
    ) -> None:
        self._directory = directory
        self._cache = cache
        # None keeps the entry until the cache is cleared.
        self._ttl = ttl

    def list_countries(self) -> List[Country]:
        cached = self._cache.get(self.cache_key)
        if cached is not None:
            return [Country(**item) for item in cached]

        payload = self._directory.fetch_all()
        countries = self.parse(payload)
        self._cache.set(self.cache_key, [asdict(country) for country in countries], self._ttl)
        return countries

    @staticmethod
    def parse(payload: Any) -> List[Country]:
        if not isinstance(payload, list):
            raise UpstreamError("Unexpected API response format. Expected an array.")

        countries: List[Country] = []
        for record in payload:
            country = parse_country(record)
            if country is None:
                continue
            countries.append(country)
        dropped = len(payload) - len(countries)
        if dropped:
            logger.debug("Dropped %s incomplete country records", dropped)
        return countries

"""
Client for the REST Countries API (https://restcountries.com).

Every lookup consults the ResponseCache first and only goes to the network
on a miss. Responses are cached verbatim. Failures are not retried.
"""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from countries.cache import ResponseCache
from utils.exceptions import UpstreamFailure, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://restcountries.com/v3.1"


class CountryClient:
    def __init__(
        self,
        cache: ResponseCache,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _fetch(self, cache_key: str, path: str, description: str, empty_on_404: bool = False) -> Any:
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        logger.debug("cache miss: %s", cache_key)
        url = f"{self.base_url}/{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Error fetching %s: %s", description, exc)
            raise UpstreamFailure(f"Failed to fetch {description}: {exc}")

        if empty_on_404 and response.status_code == 404:
            return []
        try:
            response.raise_for_status()
            data = response.json()
        except (requests.HTTPError, ValueError) as exc:
            logger.error("Error fetching %s: %s", description, exc)
            raise UpstreamFailure(f"Failed to fetch {description}: {exc}")

        self.cache.set(cache_key, data)
        return data

    def all_countries(self):
        return self._fetch("all-countries", "all", "countries")

    def by_name(self, name: str):
        """Countries whose name matches; [] when the API knows none."""
        if not name:
            raise ValidationError("Country name is required")
        return self._fetch(
            f"country-name-{name}", f"name/{quote(name, safe='')}", f"country {name}", empty_on_404=True
        )

    def by_region(self, region: str):
        if not region:
            raise ValidationError("Region is required")
        return self._fetch(f"region-{region}", f"region/{quote(region, safe='')}", f"countries in region {region}")

    def by_code(self, code: str):
        """Look up by alpha-2 or alpha-3 code; [] when the code is unknown."""
        if not code:
            raise ValidationError("Country code is required")
        return self._fetch(
            f"country-code-{code}", f"alpha/{quote(code, safe='')}", f"country with code {code}", empty_on_404=True
        )

    def clear_cache(self) -> None:
        self.cache.clear()

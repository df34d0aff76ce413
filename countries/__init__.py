"""
Read-only access to the public REST Countries API, shielded by an
in-memory response cache.
"""
from countries.cache import ResponseCache
from countries.client import CountryClient
from countries.filters import filter_countries, unique_languages

__all__ = ["ResponseCache", "CountryClient", "filter_countries", "unique_languages"]

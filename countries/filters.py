from __future__ import annotations

from typing import Iterable, List

ALL = "All"


def _active(value: str | None) -> bool:
    return bool(value) and value != ALL


def _languages(country: dict) -> list:
    return list((country.get("languages") or {}).values())


def filter_countries(
    countries: Iterable[dict],
    query: str | None = None,
    region: str | None = None,
    language: str | None = None,
) -> List[dict]:
    """
    Narrow a list of REST Countries records.
    - query: case-insensitive substring of name.common
    - region: exact region match
    - language: one of the country's spoken languages
    "All" or an empty value leaves that filter off.
    """
    result = list(countries)
    if query and query.strip():
        needle = query.strip().lower()
        result = [c for c in result if needle in ((c.get("name") or {}).get("common") or "").lower()]
    if _active(region):
        result = [c for c in result if c.get("region") == region]
    if _active(language):
        result = [c for c in result if language in _languages(c)]
    return result


def unique_languages(countries: Iterable[dict]) -> List[str]:
    """Sorted list of every language spoken across the given countries."""
    seen = set()
    for country in countries:
        seen.update(_languages(country))
    return sorted(seen)

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

COUNTRIES = [
    {"cca3": "USA", "name": {"common": "United States"}, "region": "Americas", "languages": {"eng": "English"}},
    {"cca3": "FRA", "name": {"common": "France"}, "region": "Europe", "languages": {"fra": "French"}},
]


@pytest.fixture()
def upstream(ctx) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    ctx.countries.session = session
    return session


def _ok(payload) -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = payload
    return response


def test_list_countries_filters_and_caches(client, upstream) -> None:
    upstream.get.return_value = _ok(COUNTRIES)
    response = client.get("/api/countries?region=Europe")
    assert response.status_code == 200
    assert [c["cca3"] for c in response.get_json()["data"]] == ["FRA"]

    response = client.get("/api/countries?q=united")
    assert response.get_json()["meta"]["total"] == 1
    upstream.get.assert_called_once()


def test_languages(client, upstream) -> None:
    upstream.get.return_value = _ok(COUNTRIES)
    assert client.get("/api/countries/languages").get_json() == {"data": ["English", "French"]}


def test_country_by_code(client, upstream) -> None:
    upstream.get.return_value = _ok([COUNTRIES[1]])
    response = client.get("/api/countries/fra")
    assert response.status_code == 200
    assert response.get_json()["data"]["cca3"] == "FRA"


def test_unknown_code_is_404(client, upstream) -> None:
    missing = MagicMock()
    missing.status_code = 404
    upstream.get.return_value = missing
    assert client.get("/api/countries/XXX").status_code == 404


def test_upstream_failure_is_502(client, upstream) -> None:
    upstream.get.side_effect = requests.Timeout("slow")
    response = client.get("/api/countries")
    assert response.status_code == 502
    assert response.get_json()["error"] == "UPSTREAM_FAILURE"


def test_health_and_root(client) -> None:
    assert client.get("/api/health").get_json()["status"] == "ok"
    assert client.get("/").status_code == 200
    assert client.get("/api/nope").status_code == 404

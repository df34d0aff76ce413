"""
Application context: the objects a request needs, built once per app.

Storage, the token codec (and with it the signing secret), the response
cache and the services all hang off one AppContext stored in
app.extensions, so nothing depends on module-level state and each test
app gets its own isolated set.
"""
from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from countries.cache import ResponseCache
from countries.client import CountryClient
from models.db_storage import DBStorage
from services.accounts import AccountStore
from services.favorites import FavoritesManager
from utils.security import TokenCodec

EXTENSION_KEY = "worldview"


@dataclass
class AppContext:
    storage: DBStorage
    codec: TokenCodec
    cache: ResponseCache
    countries: CountryClient
    accounts: AccountStore
    favorites: FavoritesManager
    cookie_name: str = "token"

    @classmethod
    def from_config(cls, config) -> "AppContext":
        storage = DBStorage(config["DATABASE_URL"], echo=config.get("SQL_ECHO", False))
        storage.reload()
        codec = TokenCodec(
            secret=config.get("JWT_SECRET"),
            lifetime=config["JWT_TOKEN_EXPIRES"],
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            issuer=config.get("JWT_ISSUER", "worldview-api"),
        )
        cache = ResponseCache(default_ttl=config["COUNTRY_CACHE_TTL_SECONDS"])
        client = CountryClient(
            cache,
            base_url=config["COUNTRY_API_BASE_URL"],
            timeout=config.get("COUNTRY_API_TIMEOUT"),
        )
        return cls(
            storage=storage,
            codec=codec,
            cache=cache,
            countries=client,
            accounts=AccountStore(storage),
            favorites=FavoritesManager(storage),
            cookie_name=config.get("TOKEN_COOKIE_NAME", "token"),
        )


def get_context(app=None) -> AppContext:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]

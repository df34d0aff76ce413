"""
Environment-aware configuration.
Every setting can be overridden from the environment or a .env file.
"""
import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()  # Read .env if present


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    APP_ENV = os.getenv("APP_ENV", "dev")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///worldview.db")
    SQL_ECHO = _flag("SQL_ECHO", "false")
    # Session tokens
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "worldview-api")
    JWT_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv("JWT_TOKEN_EXPIRES_SECONDS", "86400")))
    # Session cookie carrying the same token
    TOKEN_COOKIE_NAME = os.getenv("TOKEN_COOKIE_NAME", "token")
    TOKEN_COOKIE_MAX_AGE = int(os.getenv("TOKEN_COOKIE_MAX_AGE", str(24 * 60 * 60)))
    TOKEN_COOKIE_SECURE = False
    TOKEN_COOKIE_SAMESITE = "Lax"
    # Upstream country data
    COUNTRY_API_BASE_URL = os.getenv("COUNTRY_API_BASE_URL", "https://restcountries.com/v3.1")
    COUNTRY_CACHE_TTL_SECONDS = int(os.getenv("COUNTRY_CACHE_TTL_SECONDS", str(15 * 60)))
    COUNTRY_API_TIMEOUT = float(os.getenv("COUNTRY_API_TIMEOUT")) if os.getenv("COUNTRY_API_TIMEOUT") else None


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class TestingConfig(BaseConfig):
    TESTING = True
    DATABASE_URL = "sqlite://"
    JWT_SECRET = "test-secret"


class ProductionConfig(BaseConfig):
    DEBUG = False
    # No fallback secret in production: token issuing fails until one is set
    JWT_SECRET = os.getenv("JWT_SECRET", "")
    TOKEN_COOKIE_SECURE = True
    TOKEN_COOKIE_SAMESITE = "None"


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/test/prod).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig

"""
Domain exceptions shared by the services, the session middleware and the
country client. Each carries the HTTP status and error code that
api/errors.py uses to build the error envelope.
"""
from __future__ import annotations


class WorldviewError(Exception):
    status = 500
    code = "INTERNAL_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None, details: dict | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(WorldviewError):
    status = 400
    code = "VALIDATION_ERROR"
    default_message = "Invalid input"


class Conflict(WorldviewError):
    status = 400
    code = "CONFLICT"
    default_message = "User already exists"


class InvalidCredentials(WorldviewError):
    # Same message for unknown email and wrong password
    status = 400
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class Unauthenticated(WorldviewError):
    status = 401
    code = "UNAUTHENTICATED"
    default_message = "No token, authorization denied"


class NotFound(WorldviewError):
    status = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class UpstreamFailure(WorldviewError):
    status = 502
    code = "UPSTREAM_FAILURE"
    default_message = "Country data is temporarily unavailable, please retry"


class ConfigurationError(WorldviewError):
    status = 500
    code = "CONFIGURATION_ERROR"
    default_message = "Server is misconfigured"


class InvalidToken(WorldviewError):
    status = 401
    code = "INVALID_TOKEN"
    default_message = "Token is not valid"

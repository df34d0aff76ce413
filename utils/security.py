"""
security helpers:
- Argon2 password hashing via argon2-cffi
- Session token creation/verification via PyJWT (TokenCodec)
- JTI generation for token identifiers
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Any

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, InvalidHashError

from utils.exceptions import ConfigurationError, InvalidToken

ph = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password using argon2
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def generate_jti() -> str:
    """Generate a unique JTI (JWT ID).
    """
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """
    Issues and verifies signed, time-limited session tokens.

    The codec is stateless apart from the secret it was built with. It is
    constructed once per application (see api.context) rather than reading
    the secret from a global.
    """

    REQUIRED_CLAIMS = ["sub", "iat", "exp"]

    def __init__(
        self,
        secret: str | None,
        lifetime: timedelta,
        algorithm: str = "HS256",
        issuer: str = "worldview-api",
        clock: Callable[[], datetime] = _now,
    ):
        self.secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm
        self.issuer = issuer
        self._clock = clock

    @property
    def lifetime_seconds(self) -> int:
        return int(self.lifetime.total_seconds())

    def issue(self, account_id: str) -> str:
        """
        Encode the account id with iat/exp claims and sign it.
        Raises ConfigurationError if no secret is configured.
        """
        if not self.secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        now = self._clock()
        payload = {
            "iss": self.issuer,
            "sub": str(account_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime).timestamp()),
            "jti": generate_jti(),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a token. Raises InvalidToken on a bad signature,
        expiry, malformed payload or missing secret.
        """
        if not self.secret:
            raise InvalidToken("Token cannot be verified")
        if not token:
            raise InvalidToken("Token is empty")
        try:
            decoded = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": self.REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token expired")
        except jwt.InvalidTokenError as exc:
            raise InvalidToken(f"Invalid token: {exc}")

        if not isinstance(decoded.get("sub"), str) or not decoded["sub"]:
            raise InvalidToken("Invalid token: missing subject")
        return decoded

    def verify(self, token: str) -> str:
        """Return the account id carried by a valid token."""
        return self.decode(token)["sub"]

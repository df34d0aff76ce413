from __future__ import annotations
import logging
from functools import wraps
from flask import Request, request, g

from api.context import get_context
from utils.exceptions import InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)


def extract_candidate_token(req: Request, cookie_name: str) -> str | None:
    """
    Locate a session token on the request.
    The session cookie wins; the Authorization header is only consulted
    when no cookie is present.
    """
    token = (req.cookies.get(cookie_name) or "").strip()
    if token:
        return token
    auth = req.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        token = auth[len("Bearer "):].strip()
        if token:
            return token
    return None


def jwt_required():
    """
    Reject the request with 401 unless it carries a valid session token.
    On success the account id is available as g.current_user_id.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            ctx = get_context()
            token = extract_candidate_token(request, ctx.cookie_name)
            if token is None:
                logger.warning("No token on %s %s", request.method, request.path)
                raise Unauthenticated("No token, authorization denied")
            try:
                account_id = ctx.codec.verify(token)
            except InvalidToken as e:
                logger.warning("Token rejected on %s %s: %s", request.method, request.path, e)
                raise Unauthenticated("Token is not valid")

            g.current_user_id = account_id
            return fn(*args, **kwargs)

        return wrapper

    return decorator

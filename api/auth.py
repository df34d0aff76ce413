"""
Authentication blueprint:
- POST /auth/register
- POST /auth/login
- POST /auth/logout
- GET  /auth/me

The implementation:
- Uses argon2 for password hashing (via utils.security)
- Issues one signed session token (JWT, HS256) per login/registration
- Hands the token out twice: as an HTTP-only cookie and in the JSON body,
  so browser clients can use the cookie and others the Authorization header
- Logout only clears the cookie; tokens stay valid until they expire
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify, g, current_app

from models.schemas.user import UserRegisterSchema, UserLoginSchema, UserOutSchema
from utils.decorators import jwt_required

from .context import get_context

bp = Blueprint("auth", __name__)

user_register_schema = UserRegisterSchema()
user_login_schema = UserLoginSchema()
user_out_schema = UserOutSchema()


def _cookie_options() -> dict:
    return {
        "httponly": True,
        "secure": current_app.config["TOKEN_COOKIE_SECURE"],
        "samesite": current_app.config["TOKEN_COOKIE_SAMESITE"],
    }


def _session_response(user):
    ctx = get_context()
    token = ctx.codec.issue(user.id)
    response = jsonify(
        {
            "token": token,
            "token_type": "bearer",
            "expires_in": ctx.codec.lifetime_seconds,
            "user": user_out_schema.dump(user),
        }
    )
    response.set_cookie(
        ctx.cookie_name,
        token,
        max_age=current_app.config["TOKEN_COOKIE_MAX_AGE"],
        **_cookie_options(),
    )
    return response, 200


@bp.post("/register")
def register():
    """
    Register a new user and start a session.
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            username: { type: string }
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK (returns token and user, sets session cookie)
      400:
        description: Missing field or user already exists
    """
    data = user_register_schema.load(request.get_json(silent=True) or {})
    user = get_context().accounts.register(data["username"], data["email"], data["password"])
    return _session_response(user)


@bp.post("/login")
def login():
    """
    Login: returns a session token and sets the session cookie
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns token and user)
      400:
        description: Invalid credentials
    """
    data = user_login_schema.load(request.get_json(silent=True) or {})
    user = get_context().accounts.login(data["email"], data["password"])
    return _session_response(user)


@bp.post("/logout")
def logout():
    """
    Logout: clears the session cookie
    ---
    tags:
      - Auth
    responses:
      200:
        description: Logged out
    """
    response = jsonify({"message": "Logged out"})
    response.delete_cookie(get_context().cookie_name, **_cookie_options())
    return response, 200


@bp.get("/me")
@jwt_required()
def me():
    """
    Get current user info.
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
      404:
        description: User not found
    """
    user = get_context().accounts.get_by_id(g.current_user_id)
    return jsonify({"user": user_out_schema.dump(user)}), 200

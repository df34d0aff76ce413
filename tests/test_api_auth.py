from __future__ import annotations

from api import create_app
from models.user import User


def test_register_returns_token_user_and_cookie(client, register) -> None:
    response = register(client)
    assert response.status_code == 200
    body = response.get_json()
    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 86400
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@example.com"
    assert body["user"]["favorites"] == []
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]

    set_cookie = response.headers["Set-Cookie"]
    assert set_cookie.startswith(f"token={body['token']}")
    assert "HttpOnly" in set_cookie
    assert "Max-Age=86400" in set_cookie


def test_register_missing_field_is_400(client, ctx) -> None:
    response = client.post("/api/auth/register", json={"username": "alice", "email": "a@example.com"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "VALIDATION_ERROR"
    assert ctx.storage.count(User) == 0


def test_register_duplicate_is_400_and_creates_nothing(client, ctx, app, register) -> None:
    register(client)
    response = register(app.test_client(), username="alice", email="other@example.com")
    assert response.status_code == 400
    assert response.get_json()["error"] == "CONFLICT"
    assert ctx.storage.count(User) == 1


def test_register_normalizes_email(client, register) -> None:
    response = register(client, email="  Alice@Example.COM ")
    assert response.get_json()["user"]["email"] == "alice@example.com"


def test_login_after_register_returns_same_identity(client, app, register) -> None:
    registered = register(client).get_json()["user"]
    response = app.test_client().post(
        "/api/auth/login", json={"email": "ALICE@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    assert response.get_json()["user"]["id"] == registered["id"]
    assert "token=" in response.headers["Set-Cookie"]


def test_login_bad_password_and_unknown_email_look_the_same(client, register) -> None:
    register(client)
    wrong = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    unknown = client.post("/api/auth/login", json={"email": "bob@example.com", "password": "secret123"})
    assert wrong.status_code == unknown.status_code == 400
    assert wrong.get_json() == unknown.get_json()


def test_login_missing_fields_is_400(client) -> None:
    response = client.post("/api/auth/login", json={})
    assert response.status_code == 400


def test_me_with_cookie(client, register) -> None:
    register(client)
    response = client.get("/api/auth/me")
    assert response.status_code == 200
    assert response.get_json()["user"]["username"] == "alice"


def test_me_with_bearer_header(client, app, register) -> None:
    token = register(client).get_json()["token"]
    other = app.test_client(use_cookies=False)
    response = other.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.get_json()["user"]["email"] == "alice@example.com"


def test_me_without_session_is_401(app) -> None:
    response = app.test_client().get("/api/auth/me")
    assert response.status_code == 401
    assert response.get_json()["error"] == "UNAUTHENTICATED"


def test_me_with_garbage_token_is_401(app) -> None:
    response = app.test_client().get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_me_for_vanished_account_is_404(app, ctx) -> None:
    token = ctx.codec.issue("no-such-account")
    response = app.test_client().get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404


def test_logout_clears_cookie(client, register) -> None:
    register(client)
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Logged out"}
    assert "token=;" in response.headers["Set-Cookie"]
    assert client.get("/api/auth/me").status_code == 401


def test_logout_does_not_revoke_bearer_token(client, app, register) -> None:
    token = register(client).get_json()["token"]
    client.post("/api/auth/logout")
    other = app.test_client(use_cookies=False)
    response = other.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200


def test_missing_secret_in_production_config_is_a_500(register) -> None:
    app = create_app("prod", {"DATABASE_URL": "sqlite://", "JWT_SECRET": ""})
    response = register(app.test_client())
    assert response.status_code == 500
    assert response.get_json()["error"] == "CONFIGURATION_ERROR"

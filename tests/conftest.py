from __future__ import annotations

import pytest

from api import create_app, get_context
from models.db_storage import DBStorage


@pytest.fixture()
def app():
    app = create_app("test")
    yield app
    ctx = get_context(app)
    ctx.storage.close()
    ctx.storage.drop_all()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def ctx(app):
    return get_context(app)


@pytest.fixture()
def storage():
    storage = DBStorage("sqlite://")
    storage.reload()
    yield storage
    storage.close()
    storage.drop_all()


@pytest.fixture()
def register():
    def _register(client, username="alice", email="alice@example.com", password="secret123"):
        return client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    return _register

from __future__ import annotations

from contextlib import contextmanager

import pytest

from models.db_storage import DBStorage
from models.favorite import Favorite
from services.accounts import AccountStore
from services.favorites import FavoritesManager
from utils.exceptions import NotFound, ValidationError


@pytest.fixture()
def account_id(storage) -> str:
    return AccountStore(storage).register("alice", "alice@example.com", "secret123").id


@pytest.fixture()
def favorites(storage) -> FavoritesManager:
    return FavoritesManager(storage)


def test_new_account_has_no_favorites(favorites, account_id) -> None:
    assert favorites.list(account_id) == []


def test_add_is_idempotent(favorites, storage, account_id) -> None:
    assert favorites.add(account_id, "USA") == ["USA"]
    assert favorites.add(account_id, "USA") == ["USA"]
    assert storage.count(Favorite) == 1


def test_add_keeps_insertion_order(favorites, account_id) -> None:
    for code in ("USA", "FRA", "JPN"):
        favorites.add(account_id, code)
    assert favorites.list(account_id) == ["USA", "FRA", "JPN"]


def test_codes_are_normalized(favorites, account_id) -> None:
    favorites.add(account_id, " usa ")
    assert favorites.add(account_id, "USA") == ["USA"]


def test_remove_absent_code_is_noop(favorites, account_id) -> None:
    favorites.add(account_id, "USA")
    assert favorites.remove(account_id, "FRA") == ["USA"]


def test_remove_present_code(favorites, account_id) -> None:
    favorites.add(account_id, "USA")
    favorites.add(account_id, "FRA")
    assert favorites.remove(account_id, "USA") == ["FRA"]


@pytest.mark.parametrize("code", ["", "   ", None])
def test_empty_code_is_rejected(favorites, account_id, code) -> None:
    with pytest.raises(ValidationError):
        favorites.add(account_id, code)
    with pytest.raises(ValidationError):
        favorites.remove(account_id, code)


def test_favorites_are_per_account(favorites, storage, account_id) -> None:
    other = AccountStore(storage).register("bob", "bob@example.com", "secret123").id
    favorites.add(account_id, "USA")
    favorites.add(other, "FRA")
    assert favorites.list(account_id) == ["USA"]
    assert favorites.list(other) == ["FRA"]


def test_unknown_account_is_not_found(favorites) -> None:
    with pytest.raises(NotFound):
        favorites.add("missing", "USA")


def test_account_favorites_property_reflects_mutations(favorites, storage, account_id) -> None:
    favorites.add(account_id, "USA")
    favorites.add(account_id, "BRA")
    assert AccountStore(storage).get_by_id(account_id).favorites == ["USA", "BRA"]


def test_concurrent_identical_add_keeps_one_row(tmp_path, monkeypatch) -> None:
    url = f"sqlite:///{tmp_path / 'race.db'}"
    storage_a, storage_b = DBStorage(url), DBStorage(url)
    storage_a.reload()
    storage_b.reload()
    try:
        uid = AccountStore(storage_a).register("alice", "alice@example.com", "secret123").id
        real_transaction = storage_b.transaction

        @contextmanager
        def other_writer_wins():
            # another process adds the same code between b's check and b's insert
            FavoritesManager(storage_a).add(uid, "USA")
            with real_transaction() as tx:
                yield tx

        monkeypatch.setattr(storage_b, "transaction", other_writer_wins)
        assert FavoritesManager(storage_b).add(uid, "USA") == ["USA"]
        assert storage_b.count(Favorite) == 1
    finally:
        storage_a.close()
        storage_b.close()
        storage_a.drop_all()

"""
Favorites manager.

Each account's favorites behave as a set. Membership is enforced by the
unique (user_id, country_code) constraint on the favorites table, so an add
is a single guarded insert and a remove a single predicate delete; there is
no read-modify-write of a list that concurrent requests could overwrite.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from models.db_storage import DBStorage
from models.favorite import Favorite
from models.user import User
from utils.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


def normalize_code(country_code) -> str:
    if not isinstance(country_code, str) or not country_code.strip():
        raise ValidationError("Country code required")
    return country_code.strip().upper()


class FavoritesManager:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def _ensure_account(self, account_id: str) -> None:
        session = self.storage.get_session()
        if session.query(User.id).filter(User.id == account_id).first() is None:
            raise NotFound("User not found")

    def list(self, account_id: str) -> List[str]:
        self._ensure_account(account_id)
        session = self.storage.get_session()
        rows = (
            session.query(Favorite.country_code)
            .filter(Favorite.user_id == account_id)
            .order_by(Favorite.id.asc())
            .all()
        )
        return [code for (code,) in rows]

    def add(self, account_id: str, country_code: str) -> List[str]:
        """Add a code; adding a code that is already present changes nothing."""
        code = normalize_code(country_code)
        self._ensure_account(account_id)
        session = self.storage.get_session()
        present = (
            session.query(Favorite.id)
            .filter(Favorite.user_id == account_id, Favorite.country_code == code)
            .first()
        )
        if present is None:
            try:
                with self.storage.transaction() as tx:
                    tx.add(Favorite(user_id=account_id, country_code=code))
                logger.debug("Favorite %s added for %s", code, account_id)
            except IntegrityError:
                # a concurrent add inserted the same code first
                logger.debug("Favorite %s already present for %s", code, account_id)
        session.expire_all()
        return self.list(account_id)

    def remove(self, account_id: str, country_code: str) -> List[str]:
        """Remove a code; removing an absent code changes nothing."""
        code = normalize_code(country_code)
        self._ensure_account(account_id)
        with self.storage.transaction() as tx:
            deleted = (
                tx.query(Favorite)
                .filter(Favorite.user_id == account_id, Favorite.country_code == code)
                .delete(synchronize_session=False)
            )
        if deleted:
            logger.debug("Favorite %s removed for %s", code, account_id)
        self.storage.get_session().expire_all()
        return self.list(account_id)

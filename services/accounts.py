"""
Account store: registration, login and lookup of user accounts.
"""
from __future__ import annotations

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from models.db_storage import DBStorage
from models.user import User
from utils.exceptions import Conflict, InvalidCredentials, NotFound, ValidationError
from utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""


class AccountStore:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def register(self, username: str, email: str, password: str) -> User:
        """
        Create an account with an empty favorites list.
        Raises ValidationError on an empty field and Conflict when the
        username or email is already taken.
        """
        username, email = _clean(username), _clean(email).lower()
        missing = [name for name, value in (("username", username), ("email", email), ("password", password))
                   if not value]
        if missing:
            raise ValidationError("All fields required", details={"missing": missing})

        session = self.storage.get_session()
        exists = session.query(User.id).filter(or_(User.email == email, User.username == username)).first()
        if exists:
            raise Conflict("User already exists")

        user = User(username=username, email=email, password_hash=hash_password(password))
        self.storage.new(user)
        try:
            self.storage.save()
        except IntegrityError:
            # lost a race with a concurrent registration for the same identity
            raise Conflict("User already exists")
        logger.info("Registered account %s", user.id)
        return user

    def login(self, email: str, password: str) -> User:
        email = _clean(email).lower()
        if not email or not password:
            raise ValidationError("All fields required")
        session = self.storage.get_session()
        user = session.query(User).filter(User.email == email).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentials()
        return user

    def get_by_id(self, account_id: str) -> User:
        user = self.storage.get(User, account_id)
        if user is None:
            raise NotFound("User not found")
        return user

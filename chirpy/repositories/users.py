"""User repository over the JSON store."""
from __future__ import annotations

import dataclasses
from typing import List, Optional

from chirpy.domain.models import Document, User
from chirpy.repositories.errors import DuplicateEmailError, UserNotFoundError
from chirpy.repositories.json_storage import JsonStore


def _find_by_email(document: Document, email: str) -> Optional[User]:
    for user in document.users.values():
        if user.email == email:
            return user
    return None


class UserRepository:
    """CRUD helpers for user accounts. Emails are unique and case-sensitive."""

    def __init__(self, store: JsonStore) -> None:
        self.store = store

    def create(self, email: str, password_hash: str) -> User:
        def _insert(document: Document) -> User:
            if _find_by_email(document, email) is not None:
                raise DuplicateEmailError(email)
            user = User(id=document.next_user_id(), email=email, password_hash=password_hash)
            document.users[user.id] = user
            return user

        return self.store.update(_insert)

    def list(self) -> List[User]:
        return sorted(self.store.load().users.values(), key=lambda user: user.id)

    def get_by_id(self, user_id: int) -> User:
        user = self.store.load().users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def get_by_email(self, email: str) -> User:
        user = _find_by_email(self.store.load(), email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    def update(self, user_id: int, *, email: str | None = None, password_hash: str | None = None) -> User:
        def _replace(document: Document) -> User:
            current = document.users.get(user_id)
            if current is None:
                raise UserNotFoundError(user_id)
            if email is not None and email != current.email:
                other = _find_by_email(document, email)
                if other is not None and other.id != user_id:
                    raise DuplicateEmailError(email)
            updated = dataclasses.replace(
                current,
                email=email if email is not None else current.email,
                password_hash=password_hash if password_hash is not None else current.password_hash,
            )
            document.users[user_id] = updated
            return updated

        return self.store.update(_replace)

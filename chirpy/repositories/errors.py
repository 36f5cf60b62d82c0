"""Exceptions raised by the entity repositories."""
from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository-level failures."""


class PostNotFoundError(RepositoryError):
    def __init__(self, post_id: int):
        super().__init__(f"Chirp {post_id} not found")
        self.post_id = post_id


class UserNotFoundError(RepositoryError):
    def __init__(self, key: int | str):
        super().__init__(f"User {key} not found")
        self.key = key


class DuplicateEmailError(RepositoryError):
    def __init__(self, email: str):
        super().__init__(f"Email {email} already registered")
        self.email = email

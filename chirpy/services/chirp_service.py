"""Chirp-related use cases (validation, filtering, creation)."""

from __future__ import annotations

from typing import List

from chirpy.domain.models import Post
from chirpy.domain.profanity import MAX_CHIRP_LENGTH, clean_body, is_valid_body
from chirpy.repositories.posts import PostRepository


class ChirpError(Exception):
    """Base exception for chirp workflow."""


class ChirpTooLongError(ChirpError):
    """Raised when the body exceeds the configured length."""


class ChirpService:
    """Validates, cleans and stores chirps."""

    def __init__(self, posts: PostRepository, max_length: int = MAX_CHIRP_LENGTH) -> None:
        self.posts = posts
        self.max_length = max_length

    def publish(self, body: str) -> Post:
        if not is_valid_body(body, self.max_length):
            raise ChirpTooLongError(f"Chirp is too long (max {self.max_length} characters)")
        return self.posts.create(clean_body(body))

    def list_chirps(self) -> List[Post]:
        return self.posts.list()

    def get_chirp(self, chirp_id: int) -> Post:
        return self.posts.get_by_id(chirp_id)

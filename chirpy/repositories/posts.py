"""Chirp (post) repository over the JSON store."""
from __future__ import annotations

from typing import List

from chirpy.domain.models import Document, Post
from chirpy.repositories.errors import PostNotFoundError
from chirpy.repositories.json_storage import JsonStore


class PostRepository:
    """Create/list/lookup helpers for chirps."""

    def __init__(self, store: JsonStore) -> None:
        self.store = store

    def create(self, body: str) -> Post:
        def _insert(document: Document) -> Post:
            post = Post(id=document.next_post_id(), body=body)
            document.posts[post.id] = post
            return post

        return self.store.update(_insert)

    def list(self) -> List[Post]:
        document = self.store.load()
        return sorted(document.posts.values(), key=lambda post: post.id)

    def get_by_id(self, post_id: int) -> Post:
        post = self.store.load().posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

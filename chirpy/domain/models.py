"""Entity types persisted in the JSON document."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Post:
    id: int
    body: str

    def to_dict(self) -> dict:
        return {"id": self.id, "body": self.body}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        return cls(id=int(data["id"]), body=str(data["body"]))


@dataclass(frozen=True)
class User:
    id: int
    email: str
    password_hash: str

    def to_dict(self) -> dict:
        # "password" e o nome do campo no arquivo
        return {"id": self.id, "email": self.email, "password": self.password_hash}

    def to_public_dict(self) -> dict:
        return {"id": self.id, "email": self.email}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=int(data["id"]),
            email=str(data["email"]),
            password_hash=str(data.get("password") or ""),
        )


@dataclass
class Document:
    """Complete persisted state: every post and every user."""

    posts: Dict[int, Post] = field(default_factory=dict)
    users: Dict[int, User] = field(default_factory=dict)

    def next_post_id(self) -> int:
        return max(self.posts, default=0) + 1

    def next_user_id(self) -> int:
        return max(self.users, default=0) + 1

    def to_dict(self) -> dict:
        return {
            "chirps": {str(pid): post.to_dict() for pid, post in sorted(self.posts.items())},
            "users": {str(uid): user.to_dict() for uid, user in sorted(self.users.items())},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        if not isinstance(data, Mapping):
            raise TypeError("document root must be a JSON object")
        raw_posts = data.get("chirps")
        if raw_posts is None:
            raw_posts = data.get("posts")
        raw_users = data.get("users")
        posts = {int(key): Post.from_dict(value) for key, value in (raw_posts or {}).items()}
        users = {int(key): User.from_dict(value) for key, value in (raw_users or {}).items()}
        for key, post in posts.items():
            if key != post.id:
                raise ValueError(f"post key {key} does not match id {post.id}")
        for key, user in users.items():
            if key != user.id:
                raise ValueError(f"user key {key} does not match id {user.id}")
        return cls(posts=posts, users=users)

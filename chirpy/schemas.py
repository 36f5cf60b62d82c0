"""
Pydantic request/response schemas for the HTTP layer.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ChirpCreate(BaseModel):
    body: str


class ChirpResponse(BaseModel):
    id: int
    body: str


class UserCredentials(BaseModel):
    email: str
    password: str


class LoginRequest(UserCredentials):
    expires_in_seconds: Optional[int] = None


class UserResponse(BaseModel):
    id: int
    email: str


class LoginResponse(UserResponse):
    token: str

from __future__ import annotations

import logging

from fastapi import APIRouter, Header, HTTPException, Request

from chirpy.core.tokens import TokenError
from chirpy.repositories.errors import UserNotFoundError
from chirpy.routers.dependencies import get_auth_service
from chirpy.schemas import LoginRequest, LoginResponse, UserCredentials, UserResponse
from chirpy.services.auth_service import (
    AccountExistsError,
    InvalidCredentialsError,
    RegistrationError,
    TokenInvalidError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users", status_code=201, response_model=UserResponse)
def create_user(payload: UserCredentials, request: Request):
    svc = get_auth_service(request)
    try:
        user = svc.register(payload.email, payload.password)
    except RegistrationError as exc:
        raise HTTPException(400, exc.message)
    except AccountExistsError:
        raise HTTPException(409, "Email already registered")
    return user.to_public_dict()


@router.put("/users", response_model=UserResponse)
def update_user(
    payload: UserCredentials,
    request: Request,
    authorization: str | None = Header(default=None),
):
    svc = get_auth_service(request)
    try:
        user = svc.authenticate(authorization)
    except TokenInvalidError as exc:
        logger.info("Rejected token: %s", exc)
        raise HTTPException(401, "Invalid or expired token")
    try:
        updated = svc.update_account(user.id, payload.email, payload.password)
    except RegistrationError as exc:
        raise HTTPException(400, exc.message)
    except AccountExistsError:
        raise HTTPException(409, "Email already registered")
    except UserNotFoundError:
        raise HTTPException(401, "Invalid or expired token")
    return updated.to_public_dict()


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, request: Request):
    svc = get_auth_service(request)
    try:
        result = svc.login(payload.email, payload.password, payload.expires_in_seconds)
    except InvalidCredentialsError:
        raise HTTPException(401, "Incorrect email or password")
    except TokenError as exc:
        logger.error("Cannot issue token: %s", exc)
        raise HTTPException(500, "Token issuance unavailable")
    return {**result.user.to_public_dict(), "token": result.token}

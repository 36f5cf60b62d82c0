from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from chirpy.core import tokens
from chirpy.core.security import hash_password, verify_password
from chirpy.repositories.users import UserRepository
from chirpy.services.auth_service import (
    AccountExistsError,
    AuthService,
    InvalidCredentialsError,
    RegistrationError,
    TokenInvalidError,
)


@pytest.fixture()
def svc(store, settings_env):
    return AuthService(UserRepository(store))


def test_password_hash_round_trip():
    hashed = hash_password("s3cret")
    assert hashed.startswith("argon2$")
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cret", None)
    assert not verify_password("s3cret", "plain-text")


def test_register_hashes_password_and_rejects_duplicates(svc):
    user = svc.register("saul@bettercall.com", "123456")
    assert user.id == 1
    assert user.password_hash != "123456"

    with pytest.raises(AccountExistsError):
        svc.register("saul@bettercall.com", "other")
    with pytest.raises(RegistrationError):
        svc.register("not-an-email", "123456")
    with pytest.raises(RegistrationError):
        svc.register("walt@breakingbad.com", "")


def test_login_issues_token_for_user(svc):
    user = svc.register("saul@bettercall.com", "123456")
    result = svc.login("saul@bettercall.com", "123456")

    assert result.user == user
    assert tokens.decode_token(result.token) == user.id
    assert svc.authenticate(f"Bearer {result.token}") == user


def test_login_rejects_bad_credentials(svc):
    svc.register("saul@bettercall.com", "123456")
    with pytest.raises(InvalidCredentialsError):
        svc.login("saul@bettercall.com", "654321")
    with pytest.raises(InvalidCredentialsError):
        svc.login("nobody@example.com", "123456")


def test_requested_lifetime_is_capped_by_default_ttl():
    assert tokens.resolve_ttl(None, 86400) == 86400
    assert tokens.resolve_ttl(0, 86400) == 86400
    assert tokens.resolve_ttl(-5, 86400) == 86400
    assert tokens.resolve_ttl(60, 86400) == 60
    assert tokens.resolve_ttl(10**9, 86400) == 86400


def test_token_expiry_follows_requested_lifetime(settings_env):
    token = tokens.issue_token(7, expires_in_seconds=60)
    claims = jwt.decode(token, "test-secret", algorithms=["HS256"], issuer="chirpy")
    assert claims["sub"] == "7"
    assert claims["exp"] - claims["iat"] == 60


def test_authenticate_rejects_expired_forged_or_missing_tokens(svc):
    user = svc.register("saul@bettercall.com", "123456")
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    expired = jwt.encode(
        {"iss": "chirpy", "sub": str(user.id), "iat": past - timedelta(hours=1), "exp": past},
        "test-secret",
        algorithm="HS256",
    )
    forged = jwt.encode(
        {"iss": "chirpy", "sub": str(user.id), "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "another-secret",
        algorithm="HS256",
    )

    for header in (f"Bearer {expired}", f"Bearer {forged}", None, "Bearer ", "Token abc"):
        with pytest.raises(TokenInvalidError):
            svc.authenticate(header)


def test_update_account_changes_credentials(svc):
    user = svc.register("walt@breakingbad.com", "123456")
    svc.register("jesse@breakingbad.com", "abc")

    updated = svc.update_account(user.id, "heisenberg@breakingbad.com", "newpass")
    assert updated.email == "heisenberg@breakingbad.com"
    assert svc.login("heisenberg@breakingbad.com", "newpass").user.id == user.id
    with pytest.raises(InvalidCredentialsError):
        svc.login("heisenberg@breakingbad.com", "123456")
    with pytest.raises(AccountExistsError):
        svc.update_account(user.id, "jesse@breakingbad.com", "x")

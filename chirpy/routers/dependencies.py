"""
Lookup helpers for services wired onto ``app.state`` by the app factory.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from chirpy.core.metrics import HitCounter
from chirpy.services.auth_service import AuthService
from chirpy.services.chirp_service import ChirpService


def _state(request: Request):
    return getattr(request.app, "state", None)


def _require_store(request: Request) -> None:
    if getattr(_state(request), "store", None) is None:
        reason = getattr(_state(request), "store_error", None) or "Database unavailable"
        raise HTTPException(503, reason)


def get_chirp_service(request: Request) -> ChirpService:
    _require_store(request)
    svc = getattr(_state(request), "chirp_service", None)
    if not svc:
        raise RuntimeError("ChirpService nao configurado")
    return svc


def get_auth_service(request: Request) -> AuthService:
    _require_store(request)
    svc = getattr(_state(request), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService nao configurado")
    return svc


def get_hit_counter(request: Request) -> HitCounter:
    counter = getattr(_state(request), "hits", None)
    if counter is None:
        raise RuntimeError("HitCounter nao configurado")
    return counter

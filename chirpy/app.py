"""FastAPI application factory for the Chirpy API."""
from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from chirpy.core.config import Settings, get_settings
from chirpy.core.metrics import HitCounter
from chirpy.repositories.json_storage import JsonStore, StoreError
from chirpy.repositories.posts import PostRepository
from chirpy.repositories.users import UserRepository
from chirpy.routers import admin as admin_router
from chirpy.routers import chirps as chirps_router
from chirpy.routers import health as health_router
from chirpy.routers import users as users_router
from chirpy.services.auth_service import AuthService
from chirpy.services.chirp_service import ChirpService

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
APP_PREFIX = "/app"


class FileserverHitsMiddleware(BaseHTTPMiddleware):
    """Count every request served under the static ``/app`` prefix."""

    def __init__(self, app, *, counter: HitCounter) -> None:
        super().__init__(app)
        self._counter = counter

    async def dispatch(self, request, call_next):
        path = request.url.path
        if path.startswith(APP_PREFIX + "/"):
            self._counter.increment()
        return await call_next(request)


def open_store(settings: Settings) -> JsonStore:
    """Open the configured database, creating it only when DB_AUTOCREATE is set."""
    if settings.db_autocreate:
        return JsonStore.create(settings.database_path)
    return JsonStore.open(settings.database_path)


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": "Internal storage error"}, status_code=500)


def create_app(settings: Settings | None = None, store: JsonStore | None = None) -> FastAPI:
    """
    Build the app. When ``store`` is not given the configured database is opened;
    if that fails the app still serves health/admin/static routes but every
    store-backed route answers 503.
    """
    settings = settings or get_settings()
    app = FastAPI(title="Chirpy API")

    store_error = None
    if store is None:
        try:
            store = open_store(settings)
        except StoreError as exc:
            store_error = str(exc)
            logger.error("Database unavailable, store-backed routes disabled: %s", exc)

    app.state.store = store
    app.state.store_error = store_error
    app.state.hits = HitCounter()
    app.state.templates = Jinja2Templates(directory=os.path.join(BASE, "templates"))
    if store is not None:
        app.state.chirp_service = ChirpService(PostRepository(store), max_length=settings.max_chirp_length)
        app.state.auth_service = AuthService(UserRepository(store))

    app.add_middleware(FileserverHitsMiddleware, counter=app.state.hits)
    app.add_exception_handler(StoreError, _store_error_handler)

    app.include_router(health_router.router)
    app.include_router(admin_router.router)
    app.include_router(chirps_router.router)
    app.include_router(users_router.router)
    app.mount(
        APP_PREFIX,
        StaticFiles(directory=settings.static_dir, html=True, check_dir=False),
        name="app",
    )
    return app

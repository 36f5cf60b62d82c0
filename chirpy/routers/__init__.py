"""
FastAPI routers grouped by domain (chirps, users, admin, health).

Each module exposes an APIRouter included by ``chirpy.app.create_app``.
"""

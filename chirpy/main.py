#!/usr/bin/env python3
"""
Run the Chirpy API.

Uso:
  python -m chirpy.main [--host 0.0.0.0] [--port 8080] [--db database.json] [--init-db] [--debug] [--strict]
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from chirpy.app import create_app, open_store
from chirpy.core.config import get_settings
from chirpy.repositories.json_storage import JsonStore, StoreError

logger = logging.getLogger("chirpy")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Chirpy API server")
    ap.add_argument("--host", help="Interface to bind (default: HOST or 0.0.0.0)")
    ap.add_argument("--port", type=int, help="Port to listen on (default: PORT or 8080)")
    ap.add_argument("--db", help="Path to the JSON database (default: DATABASE_PATH)")
    ap.add_argument("--init-db", action="store_true", help="Create an empty database if none exists")
    ap.add_argument("--debug", action="store_true", help="Wipe the database before starting")
    ap.add_argument("--strict", action="store_true", help="Exit instead of serving when the database cannot be opened")
    return ap


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    get_settings.cache_clear()
    settings = get_settings()
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.db:
        overrides["database_path"] = args.db
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; /api/login will fail")

    store = None
    try:
        if args.debug:
            store = JsonStore.create(settings.database_path, overwrite=True)
        elif args.init_db:
            store = JsonStore.create(settings.database_path)
        else:
            store = open_store(settings)
    except StoreError as exc:
        if args.strict:
            logger.error("Cannot open database: %s", exc)
            return 1
        # create_app logs and disables store-backed routes
        store = None

    app = create_app(settings, store=store)
    logger.info("Serving on port: %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())

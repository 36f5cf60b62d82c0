#!/usr/bin/env python3
"""
Listar chirps e usuarios de um banco JSON do Chirpy.

Uso:
  python scripts/show_db.py [--path database.json]
"""
from __future__ import annotations

import argparse
import sys

from chirpy.core.config import get_settings
from chirpy.repositories.json_storage import JsonStore
from chirpy.repositories.posts import PostRepository
from chirpy.repositories.users import UserRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Listar conteudo do banco")
    ap.add_argument("--path", help="Arquivo do banco (default: DATABASE_PATH)")
    args = ap.parse_args()

    store = JsonStore.open((args.path or "").strip() or get_settings().database_path)
    posts = PostRepository(store).list()
    users = UserRepository(store).list()
    print(f"Chirps: {len(posts)}")
    for post in posts:
        print(f"  #{post.id}: {post.body}")
    print(f"Usuarios: {len(users)}")
    for user in users:
        print(f"  #{user.id}: {user.email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)

#!/usr/bin/env python3
"""
Criar um banco JSON vazio para o Chirpy.

Uso:
  python scripts/init_db.py [--path database.json] [--force]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chirpy.core.config import get_settings
from chirpy.repositories.json_storage import JsonStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Criar banco JSON vazio")
    ap.add_argument("--path", help="Arquivo do banco (default: DATABASE_PATH)")
    ap.add_argument("--force", action="store_true", help="Sobrescreve um banco existente")
    args = ap.parse_args()

    path = Path((args.path or "").strip() or get_settings().database_path)
    if path.exists() and not args.force:
        raise SystemExit(f"'{path}' ja existe (use --force para recriar)")

    JsonStore.create(path, overwrite=args.force)
    print("OK: banco criado")
    print(f"  Arquivo: {path.resolve()}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)

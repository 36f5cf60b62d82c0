from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote chirpy seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chirpy.core import config as core_config  # noqa: E402
from chirpy.repositories.json_storage import JsonStore  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    """Store vazio num arquivo temporário."""
    return JsonStore.create(tmp_path / "database.json")


@pytest.fixture()
def settings_env(tmp_path, monkeypatch):
    """Configura variaveis de ambiente isoladas e limpa o cache de settings."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>Welcome to Chirpy</h1>", encoding="utf-8")
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("STATIC_DIR", str(static_dir))
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "database.json"))
    monkeypatch.delenv("DB_AUTOCREATE", raising=False)
    monkeypatch.delenv("TOKEN_TTL_SECONDS", raising=False)
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()

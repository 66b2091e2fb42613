"""
QuickNotes — Configuration and CLI Tests
==========================================

What we test:
    ✅ Plain PostgreSQL URLs are rewritten for the asyncpg driver
    ✅ POSTGRES_URL works as an alias for DATABASE_URL
    ✅ Invalid log levels are rejected
    ✅ `quicknotes init-db` exits 0 on success and 1 when the store is unreachable
"""

import pytest
from pydantic import ValidationError

from quicknotes.cli import main
from quicknotes.config import Settings


class TestSettings:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("postgres://u:p@db:5432/notes", "postgresql+asyncpg://u:p@db:5432/notes"),
            ("postgresql://u:p@db:5432/notes", "postgresql+asyncpg://u:p@db:5432/notes"),
            ("postgresql+asyncpg://u:p@db/notes", "postgresql+asyncpg://u:p@db/notes"),
            ("sqlite+aiosqlite:///./x.db", "sqlite+aiosqlite:///./x.db"),
        ],
    )
    def test_database_url_normalization(self, raw, expected):
        assert Settings(database_url=raw).database_url == expected

    def test_postgres_url_alias(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("POSTGRES_URL", "postgresql://a:b@host/db")

        assert Settings().database_url == "postgresql+asyncpg://a:b@host/db"

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite:///x.db").is_sqlite
        assert not Settings(database_url="postgresql://a@h/d").is_sqlite

    def test_log_level_is_validated(self):
        assert Settings(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestInitDbCommand:

    def test_init_db_success(self, tmp_path):
        url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"

        assert main(["init-db", "--database-url", url]) == 0
        # Idempotent
        assert main(["init-db", "--database-url", url]) == 0
        assert (tmp_path / "cli.db").exists()

    def test_init_db_unreachable_store(self):
        url = "sqlite+aiosqlite:////nonexistent-quicknotes-dir/missing/cli.db"

        assert main(["init-db", "--database-url", url]) == 1

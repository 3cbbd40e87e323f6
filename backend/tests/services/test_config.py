"""Settings — environment parsing and validation."""

import pytest
from pydantic import ValidationError

from pursuit.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    s = Settings(database_url="postgresql://u:p@db/pursuit")
    assert s.database_url == "postgresql+asyncpg://u:p@db/pursuit"


def test_sqlite_url_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///./x.db")
    assert s.database_url == "sqlite+aiosqlite:///./x.db"


def test_delay_bounds_must_be_ordered():
    with pytest.raises(ValidationError):
        Settings(apply_delay_min_ms=600, apply_delay_max_ms=300)


def test_delay_bounds_from_environment(monkeypatch):
    monkeypatch.setenv("APPLY_DELAY_MIN_MS", "10")
    monkeypatch.setenv("APPLY_DELAY_MAX_MS", "20")
    s = Settings()
    assert (s.apply_delay_min_ms, s.apply_delay_max_ms) == (10, 20)

"""Shared fixtures: throwaway SQLite files built with the stdlib driver."""
import sqlite3
from pathlib import Path

import pytest

BLOG_DDL = """
CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
CREATE TABLE posts (
    id INTEGER PRIMARY KEY,
    author_id INTEGER,
    FOREIGN KEY (author_id) REFERENCES users(id)
);
"""


def build_db(path: Path, ddl: str) -> Path:
    conn = sqlite3.connect(path)
    try:
        conn.executescript(ddl)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def make_db(tmp_path):
    def _make(ddl: str, name: str = "test.db") -> Path:
        return build_db(tmp_path / name, ddl)
    return _make


@pytest.fixture
def blog_db(make_db) -> Path:
    return make_db(BLOG_DDL, "blog.db")


@pytest.fixture
def blog_conn(blog_db):
    conn = sqlite3.connect(blog_db)
    yield conn
    conn.close()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    from sqlite_viz.config import get_settings

    for var in ("SQLITE_VIZ_LOG_LEVEL", "SQLITE_VIZ_PRIMARY_COLOR", "SQLITE_VIZ_NULLABLE_COLOR"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

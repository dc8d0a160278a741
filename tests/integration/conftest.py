import os
import uuid
from collections.abc import Callable, Generator
from typing import Any

import psycopg
import pytest
from psycopg import sql

from capcode.config.settings import Settings
from capcode.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "capcode_test")
    return Settings(storage_backend="postgres", hash_salt="integration-salt")


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def capcode_table(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    """Create a throwaway capcodes table and drop it afterwards."""
    table = f"capcodes_{uuid.uuid4().hex[:12]}"
    db_conn.execute(
        sql.SQL(
            """
            CREATE TABLE {} (
                id BIGSERIAL PRIMARY KEY,
                capcode TEXT NOT NULL,
                timestamp TIMESTAMPTZ NOT NULL
            )
            """
        ).format(sql.Identifier(table))
    )
    db_conn.commit()
    try:
        yield table
    finally:
        db_conn.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(sql.Identifier(table)))
        db_conn.commit()


@pytest.fixture
def fetch_rows(db_conn: psycopg.Connection[Any]) -> Callable[[str], list[tuple[Any, ...]]]:
    """Return a reader for (capcode, timestamp) rows of a table."""

    def _fetch(table: str) -> list[tuple[Any, ...]]:
        with db_conn.cursor() as cur:
            cur.execute(
                sql.SQL("SELECT capcode, timestamp FROM {} ORDER BY id").format(
                    sql.Identifier(table)
                )
            )
            rows = cur.fetchall()
        db_conn.commit()
        return rows

    return _fetch

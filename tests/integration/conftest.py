"""
Name: Integration Test DB Setup

Responsibilities:
  - Ensure the schema exists before integration tests run
  - Run Alembic migrations once per test session
  - Provide a real pool and a clean `users` table per test

Notes:
  - Only runs when RUN_INTEGRATION=1
  - Uses DATABASE_URL from environment (see alembic/env.py)
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from psycopg_pool import ConnectionPool

ROOT_DIR = Path(__file__).resolve().parents[2]

DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost")
DB_PORT = os.getenv("POSTGRES_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "user_accounts_test")
DEFAULT_DATABASE_URL = (
    f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)


def pytest_collection_modifyitems(config, items) -> None:
    if os.getenv("RUN_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set RUN_INTEGRATION=1 to run integration tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


@pytest.fixture(scope="session")
def migrated_database(database_url: str) -> str:
    cfg = Config(str(ROOT_DIR / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT_DIR / "alembic"))
    os.environ["DATABASE_URL"] = database_url
    command.upgrade(cfg, "head")
    return database_url


@pytest.fixture(scope="session")
def db_pool(migrated_database: str):
    pool = ConnectionPool(conninfo=migrated_database, min_size=1, max_size=2, open=True)
    yield pool
    pool.close()


@pytest.fixture
def clean_users(db_pool: ConnectionPool) -> ConnectionPool:
    with db_pool.connection() as conn:
        conn.execute("TRUNCATE users RESTART IDENTITY")
    return db_pool

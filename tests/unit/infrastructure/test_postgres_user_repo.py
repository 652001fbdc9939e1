"""
Name: Postgres User Repository Tests (offline)

Responsibilities:
  - Row -> User mapping (status parsing, NULL status)
  - INSERT vs versioned UPDATE selection in save()
  - Error wrapping into DatabaseError / ConcurrentUpdateError

Notes:
  - Uses MagicMock for the pool; no real DB
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from user_accounts.crosscutting.exceptions import (
    ConcurrentUpdateError,
    DatabaseError,
)
from user_accounts.domain.entities import UserStatus
from user_accounts.infrastructure.repositories import PostgresUserRepository

pytestmark = pytest.mark.unit

_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _row(*, user_id=1, status="ACTIVE", balance=Decimal("10.00"), version=0):
    return (
        user_id,
        "Ada",
        "Lovelace",
        36,
        balance,
        Decimal("0.00"),
        status,
        version,
        _NOW,
        _NOW,
    )


def _pool_returning(row):
    pool = MagicMock()
    conn = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    conn.execute.return_value.fetchone.return_value = row
    return pool, conn


class TestFindById:
    def test_maps_row_to_user(self):
        pool, conn = _pool_returning(_row(status="ACTIVE", version=3))

        user = PostgresUserRepository(pool=pool).find_by_id(1)

        assert user.id == 1
        assert user.status is UserStatus.ACTIVE
        assert user.balance == Decimal("10.00")
        assert user.version == 3
        sql, params = conn.execute.call_args.args
        assert "FROM users" in sql
        assert params == (1,)

    def test_null_status_maps_to_none(self):
        pool, _ = _pool_returning(_row(status=None))

        user = PostgresUserRepository(pool=pool).find_by_id(1)

        assert user.status is None

    def test_missing_row_returns_none(self):
        pool, _ = _pool_returning(None)

        assert PostgresUserRepository(pool=pool).find_by_id(404) is None

    def test_unknown_status_raises_database_error(self):
        pool, _ = _pool_returning(_row(status="FROZEN"))

        with pytest.raises(DatabaseError, match="Invalid user status"):
            PostgresUserRepository(pool=pool).find_by_id(1)

    def test_driver_failure_is_wrapped(self):
        pool = MagicMock()
        pool.connection.side_effect = RuntimeError("connection refused")

        with pytest.raises(DatabaseError, match="find_by_id failed"):
            PostgresUserRepository(pool=pool).find_by_id(1)

    def test_failure_log_carries_the_error_id(self, caplog):
        pool = MagicMock()
        pool.connection.side_effect = RuntimeError("connection refused")

        with caplog.at_level(logging.ERROR, logger="user_accounts"):
            with pytest.raises(DatabaseError) as exc_info:
                PostgresUserRepository(pool=pool).find_by_id(7)

        record = next(
            r for r in caplog.records if "find_by_id failed" in r.getMessage()
        )
        assert exc_info.value.error_code == "DATABASE_ERROR"
        assert record.error_id == exc_info.value.error_id
        assert record.user_id == 7


class TestSave:
    def test_new_user_is_inserted(self, user_factory):
        pool, conn = _pool_returning(_row(user_id=5, status=None, version=0))

        saved = PostgresUserRepository(pool=pool).save(user_factory.create())

        sql, params = conn.execute.call_args.args
        assert sql.strip().startswith("INSERT INTO users")
        assert params == ("Ada", "Lovelace", 36, Decimal("0"), Decimal("0"), None)
        assert saved.id == 5

    def test_existing_user_is_updated_with_version_guard(self, user_factory):
        pool, conn = _pool_returning(_row(user_id=1, status="INACTIVE", version=3))
        user = user_factory.create(user_id=1, status=UserStatus.INACTIVE)
        user.version = 2

        saved = PostgresUserRepository(pool=pool).save(user)

        sql, params = conn.execute.call_args.args
        assert "UPDATE users" in sql
        assert "WHERE id = %s AND version = %s" in sql
        assert params[-3:] == ("INACTIVE", 1, 2)
        assert saved.version == 3

    def test_update_returns_stored_balance_not_the_input(self, user_factory):
        pool, _ = _pool_returning(
            _row(user_id=1, status="ACTIVE", balance=Decimal("0.00"), version=1)
        )
        user = user_factory.create(user_id=1, balance=Decimal("0.004"))

        saved = PostgresUserRepository(pool=pool).save(user)

        assert saved.balance == Decimal("0.00")
        assert user.balance == Decimal("0.004")

    def test_update_matching_no_row_is_concurrent_update(self, user_factory):
        pool, _ = _pool_returning(None)

        with pytest.raises(ConcurrentUpdateError):
            PostgresUserRepository(pool=pool).save(user_factory.create(user_id=1))

    def test_insert_without_returned_row_raises(self, user_factory):
        pool, _ = _pool_returning(None)

        with pytest.raises(DatabaseError, match="insert returned no row"):
            PostgresUserRepository(pool=pool).save(user_factory.create())


def test_uses_global_pool_when_none_injected(monkeypatch):
    pool, _ = _pool_returning(_row())
    monkeypatch.setattr(
        "user_accounts.infrastructure.db.pool.get_pool", lambda: pool
    )

    user = PostgresUserRepository().find_by_id(1)

    assert user.id == 1

"""
============================================================
CRC CARD — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Load users by id.
  - Insert new users (id assigned by the identity column).
  - Update whole records guarded by the `version` column (optimistic locking).
  - Map raw rows -> domain entity `User` and validate `UserStatus`.
  - Surface failures consistently via `DatabaseError` with structured logging.

Collaborators:
  - psycopg_pool.ConnectionPool (connection pool)
  - infrastructure.db.pool.get_pool (global pool accessor)
  - domain.entities.User / UserStatus
  - crosscutting.logger.logger
  - crosscutting.exceptions.DatabaseError / ConcurrentUpdateError

Constraints / Notes:
  - Pure repository: NO business rules (status gating, funds) here.
  - Returns None when the record does not exist (no exception for "not found").
  - Status casting is strict: an unknown persisted value -> DatabaseError.
  - Always parameterised SQL (never interpolate user input).
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import ConcurrentUpdateError, DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import User, UserStatus


class PostgresUserRepository:
    """R: PostgreSQL implementation of the user Record Store."""

    # R: Explicit column list keeps the contract with the migrations in one place.
    _SELECT_COLUMNS = """
        id, name, surname, age, balance, debt, status,
        version, created_at, updated_at
    """

    def __init__(self, pool: Optional[ConnectionPool] = None):
        # R: Injectable pool for tests; production uses the global accessor.
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    # =========================================================
    # Mapping
    # =========================================================
    @staticmethod
    def _row_to_user(row: tuple) -> User:
        (
            user_id,
            name,
            surname,
            age,
            balance,
            debt,
            status,
            version,
            created_at,
            updated_at,
        ) = row

        try:
            parsed_status = UserStatus(status) if status is not None else None
        except ValueError as exc:
            raise DatabaseError(f"Invalid user status in database: {status}") from exc

        return User(
            id=user_id,
            name=name,
            surname=surname,
            age=age,
            balance=balance,
            debt=debt,
            status=parsed_status,
            version=version,
            created_at=created_at,
            updated_at=updated_at,
        )

    @staticmethod
    def _status_value(user: User) -> str | None:
        return user.status.value if user.status is not None else None

    # =========================================================
    # Execution helper (DRY + consistent errors)
    # =========================================================
    def _fetchone(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> tuple | None:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            error = DatabaseError(f"{context_msg}: {exc}")
            logger.exception(
                context_msg,
                extra={**extra, "error": str(exc), "error_id": error.error_id},
            )
            raise error from exc

    # =========================================================
    # Repository API
    # =========================================================
    def find_by_id(self, user_id: int) -> Optional[User]:
        row = self._fetchone(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM users
                WHERE id = %s
            """,
            params=(user_id,),
            context_msg="PostgresUserRepository: find_by_id failed",
            extra={"user_id": user_id},
        )
        return self._row_to_user(row) if row else None

    def save(self, user: User) -> User:
        if user.id is None:
            return self._insert(user)
        return self._update(user)

    def _insert(self, user: User) -> User:
        row = self._fetchone(
            query=f"""
                INSERT INTO users (name, surname, age, balance, debt, status)
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=(
                user.name,
                user.surname,
                user.age,
                user.balance,
                user.debt,
                self._status_value(user),
            ),
            context_msg="PostgresUserRepository: insert failed",
            extra={"surname": user.surname},
        )
        if not row:
            raise DatabaseError("PostgresUserRepository: insert returned no row")
        return self._row_to_user(row)

    def _update(self, user: User) -> User:
        row = self._fetchone(
            query=f"""
                UPDATE users
                SET name = %s,
                    surname = %s,
                    age = %s,
                    balance = %s,
                    debt = %s,
                    status = %s,
                    version = version + 1,
                    updated_at = now()
                WHERE id = %s AND version = %s
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=(
                user.name,
                user.surname,
                user.age,
                user.balance,
                user.debt,
                self._status_value(user),
                user.id,
                user.version,
            ),
            context_msg="PostgresUserRepository: update failed",
            extra={"user_id": user.id, "version": user.version},
        )
        if not row:
            # R: Either the row is gone or another writer bumped the version.
            raise ConcurrentUpdateError(user.id, user.version)
        return self._row_to_user(row)

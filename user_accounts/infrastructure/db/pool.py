"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Component:
  PostgreSQL connection pool (singleton)

Responsibilities:
  - Initialise, expose and close the connection pool.
  - Configure each connection: statement_timeout.

Collaborators:
  - psycopg_pool.ConnectionPool
  - crosscutting.config.get_settings

Principles:
  - Fail-fast (double init, use without init)
  - Encapsulation (single process-wide pool)
===============================================================================
"""

from __future__ import annotations

import threading
from typing import Optional

from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError

_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _configure_connection(conn) -> None:
    """
    Configure a pooled connection.

    Runs when the pool creates a new connection.
    """
    from ...crosscutting.config import get_settings

    timeout_ms = int(get_settings().db_statement_timeout_ms)
    if timeout_ms > 0:
        conn.execute(f"SET statement_timeout = {timeout_ms}")
        conn.commit()


def _open_pool(database_url: str, min_size: int, max_size: int) -> ConnectionPool:
    """Open the singleton. Caller must hold _pool_lock."""
    global _pool

    logger.info(
        "Initializing DB pool",
        extra={"min_size": min_size, "max_size": max_size},
    )

    _pool = ConnectionPool(
        conninfo=database_url,
        min_size=min_size,
        max_size=max_size,
        configure=_configure_connection,
        open=True,
    )

    logger.info(
        "DB pool initialized",
        extra={"min_size": min_size, "max_size": max_size},
    )

    return _pool


def init_pool(database_url: str, min_size: int, max_size: int) -> ConnectionPool:
    """
    Initialise the pool (once per process).
    """
    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("DB pool already initialized.")
        return _open_pool(database_url, min_size, max_size)


def get_or_init_pool(
    database_url: str, min_size: int, max_size: int
) -> ConnectionPool:
    """
    Return the singleton pool, opening it first if needed.

    Check and init happen under one lock, so concurrent first callers
    share a single pool.
    """
    with _pool_lock:
        if _pool is not None:
            return _pool
        return _open_pool(database_url, min_size, max_size)


def get_pool() -> ConnectionPool:
    """
    Return the singleton pool.
    """
    if _pool is None:
        raise PoolNotInitializedError("DB pool not initialized. Call init_pool() first.")
    return _pool


def is_initialized() -> bool:
    return _pool is not None


def close_pool() -> None:
    """
    Close the pool (idempotent).
    """
    global _pool

    with _pool_lock:
        if _pool is not None:
            logger.info("Closing DB pool")
            try:
                _pool.close()
            finally:
                _pool = None
            logger.info("DB pool closed")


def reset_pool() -> None:
    """
    Reset for tests.

    Unlike close_pool(), a failing close is logged and the singleton is
    cleared anyway.
    """
    global _pool

    with _pool_lock:
        if _pool is not None:
            try:
                _pool.close()
            except Exception:
                logger.warning("DB pool close failed during reset", exc_info=True)
        _pool = None

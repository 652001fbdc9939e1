# user_accounts/crosscutting/exceptions.py
"""
===============================================================================
MODULE: Typed backend exceptions (internal errors)
===============================================================================

Goal
----
Keep internal exceptions coherent, with:
- a stable error_code
- an error_id to correlate with logs
- a human message (never leaking secrets)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  AccountsError + subclasses

Responsibilities:
  - Standardise infrastructure errors raised below the use cases
  - Generate error_id for tracing

Collaborators:
  - infrastructure/repositories (raise DatabaseError / ConcurrentUpdateError)
  - application/usecases/users (map ConcurrentUpdateError to CONFLICT)
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class AccountsError(Exception):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      AccountsError

    Responsibilities:
      - Base for internal errors of the system
      - Provide error_code + error_id + message
    ----------------------------------------------------------------------------
    """

    error_code: str = "ACCOUNTS_ERROR"

    def __init__(self, message: str, error_id: str | None = None):
        self.message = message
        self.error_id = error_id or str(uuid4())
        super().__init__(message)


class DatabaseError(AccountsError):
    """DB errors (connection, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class ConcurrentUpdateError(AccountsError):
    """A versioned write lost the race against another writer of the same row."""

    error_code: str = "CONCURRENT_UPDATE"

    def __init__(self, user_id: int, expected_version: int):
        self.user_id = user_id
        self.expected_version = expected_version
        super().__init__(
            f"User {user_id} was modified concurrently "
            f"(expected version {expected_version})"
        )

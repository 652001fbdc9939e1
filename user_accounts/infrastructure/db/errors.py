"""
===============================================================================
CRC CARD — infrastructure/db/errors.py
===============================================================================

Component:
  Typed pool/connectivity errors

Responsibilities:
  - Avoid bare RuntimeError with ad-hoc messages.
  - Give clear meaning: "not initialized", "already initialized", etc.
===============================================================================
"""


class DatabasePoolError(RuntimeError):
    """Base of database pool errors."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """init_pool() was called more than once."""


class PoolNotInitializedError(DatabasePoolError):
    """The pool was used before init_pool()."""

"""Database connectivity: pool lifecycle and its typed errors."""

from .errors import (
    DatabasePoolError,
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
)
from .pool import (
    close_pool,
    get_or_init_pool,
    get_pool,
    init_pool,
    is_initialized,
    reset_pool,
)

__all__ = [
    "init_pool",
    "get_or_init_pool",
    "get_pool",
    "close_pool",
    "reset_pool",
    "is_initialized",
    "DatabasePoolError",
    "PoolAlreadyInitializedError",
    "PoolNotInitializedError",
]

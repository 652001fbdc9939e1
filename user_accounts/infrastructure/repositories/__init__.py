"""
============================================================
CRC CARD
============================================================
Class: user_accounts.infrastructure.repositories (Package exports)

Responsibilities:
- Expose the concrete user repositories (Postgres and InMemory)
  from a single import point.

Collaborators:
- Postgres repositories (raw SQL)
- InMemory repositories (testing / local dev)
============================================================
"""

# ---------------------------
# In-memory implementations
# Fast unit tests and throwaway environments. Nothing survives a restart.
# ---------------------------
from .in_memory import InMemoryUserRepository

# ---------------------------
# Postgres implementations
# Production persistence with versioned updates.
# ---------------------------
from .postgres import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "InMemoryUserRepository",
]

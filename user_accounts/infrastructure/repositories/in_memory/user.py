"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Keep user records in memory (tests / local dev).
  - Assign auto-incrementing integer ids starting at 1, like the
    `users.id` identity column.
  - Enforce optimistic versioning on update, like the Postgres repo.

Collaborators:
  - domain.entities.User
  - domain.repositories.UserRepository (contract)
  - crosscutting.exceptions.ConcurrentUpdateError

Constraints / Notes:
  - Thread-safe: every access happens under a Lock.
  - Defensive copies: callers never hold the instance stored in the dict,
    so mutating a loaded User has no effect until save().
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional

from ....crosscutting.exceptions import ConcurrentUpdateError
from ....domain.entities import User
from ....domain.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    In-memory, thread-safe user repository.

    Mental model:
    - _users is the in-memory "table" (id -> User).
    - _next_id plays the role of the identity sequence.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, User] = {}
        self._next_id = 1

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            stored = self._users.get(user_id)
            return replace(stored) if stored is not None else None

    def save(self, user: User) -> User:
        now = self._now()
        with self._lock:
            if user.id is None:
                stored = replace(
                    user,
                    id=self._next_id,
                    version=0,
                    created_at=now,
                    updated_at=now,
                )
                self._next_id += 1
            else:
                current = self._users.get(user.id)
                if current is None or current.version != user.version:
                    raise ConcurrentUpdateError(user.id, user.version)
                stored = replace(
                    user,
                    version=current.version + 1,
                    created_at=current.created_at,
                    updated_at=now,
                )

            self._users[stored.id] = stored
            return replace(stored)

    def count(self) -> int:
        """R: Number of stored records (test helper)."""
        with self._lock:
            return len(self._users)

    def clear(self) -> None:
        """R: Drop every record and restart ids at 1 (test helper)."""
        with self._lock:
            self._users.clear()
            self._next_id = 1

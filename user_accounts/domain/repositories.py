"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the persistence contract for user records (port).
- Keep the application layer independent from infrastructure (PostgreSQL, in-memory).
- Enable dependency inversion and straightforward unit testing (mock/stub repositories).

Collaborators
- domain.entities: User
- infrastructure.repositories: postgres / in_memory implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Implementations MUST match method signatures exactly.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
- Absence is signalled with None, never with an exception.
"""

from typing import Optional, Protocol

from .entities import User


class UserRepository(Protocol):
    """
    R: Interface for user record persistence (the Record Store).

    Implementations must provide:
      - Point lookup by identifier
      - Upsert by identifier with optimistic versioning
    """

    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        R: Load a user by id.

        Returns:
            A User detached from the store, or None if the id is unknown.
        """
        ...

    def save(self, user: User) -> User:
        """
        R: Persist a user.

        - user.id is None  -> insert, assign id, version 0
        - user.id is set   -> update by id guarded by user.version

        Returns:
            The stored User (with id/version/timestamps as persisted).

        Raises:
            ConcurrentUpdateError: the guarded update matched no row.
        """
        ...

"""
===============================================================================
CRC CARD — domain/entities.py
===============================================================================

Module:
    Domain entities (User, UserStatus)

Responsibilities:
    - Define the account record the whole service revolves around.
    - Offer minimal helpers (methods) that keep simple invariants in one place.
    - Keep clear types for use cases and repositories.

Collaborators:
    - domain.repositories: persist/load these entities.
    - application/usecases/users: build/consume these entities.
    - application.user_mapper: turns a User into its outward-facing profile.

Principles:
    - No DB/Redis/web dependencies.
    - Data + minimal behaviour (no business rules about status gating here).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

ZERO = Decimal("0")


class UserStatus(str, Enum):
    """Account status. A freshly created user has no status at all (None)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


@dataclass(eq=False)
class User:
    """
    Account record (table `users`).

    Important:
      - id is None until the Record Store assigns it on first save.
      - Identity is the id: two User values are equal iff their ids match.
      - version is owned by the Record Store (optimistic concurrency).
      - debt is reserved: carried and exposed, never mutated here.
    """

    name: str
    surname: str
    age: int
    balance: Optional[Decimal] = None
    debt: Optional[Decimal] = None
    status: Optional[UserStatus] = None
    id: Optional[int] = None
    version: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def new(cls, *, name: str, surname: str, age: int) -> "User":
        """Fresh account: zero balance, zero debt, status left unset."""
        return cls(name=name, surname=surname, age=age, balance=ZERO, debt=ZERO)

    @property
    def current_balance(self) -> Decimal:
        """Stored balance, with a missing value read as zero."""
        return self.balance if self.balance is not None else ZERO

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    @property
    def is_inactive(self) -> bool:
        """True only for an explicit INACTIVE; an unset status is not inactive."""
        return self.status is UserStatus.INACTIVE

    def deactivate(self) -> None:
        self.status = UserStatus.INACTIVE

    def credit(self, amount: Decimal) -> Decimal:
        """Add amount to the balance and return the new balance."""
        self.balance = self.current_balance + amount
        return self.balance

    def debit(self, amount: Decimal) -> Decimal:
        """
        Subtract amount from the balance and return the new balance.

        Note:
          - Does not check funds; the payment use case validates before calling.
        """
        self.balance = self.current_balance - amount
        return self.balance

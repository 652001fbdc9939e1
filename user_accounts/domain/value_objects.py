"""
Name: Domain Value Objects

Responsibilities:
  - Immutable read views built from domain entities

Collaborators:
  - application.user_mapper: builds UserProfile from User
  - application/usecases/users: returns UserProfile in results
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class UserProfile:
    """
    Outward-facing profile of a user.

    Exposes name, surname, age, balance and debt. The identifier and the
    status are internal and never part of the profile.
    """

    name: str
    surname: str
    age: int
    balance: Optional[Decimal]
    debt: Optional[Decimal]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "surname": self.surname,
            "age": self.age,
            "balance": self.balance,
            "debt": self.debt,
        }

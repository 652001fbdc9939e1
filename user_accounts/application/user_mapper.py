"""
Name: User -> UserProfile mapper

Responsibilities:
  - Pure, stateless projection of a stored record onto its public view
  - Drop internal-only fields (id, status, version, timestamps)
"""

from __future__ import annotations

from ..domain.entities import User
from ..domain.value_objects import UserProfile


def to_user_profile(user: User) -> UserProfile:
    return UserProfile(
        name=user.name,
        surname=user.surname,
        age=user.age,
        balance=user.balance,
        debt=user.debt,
    )

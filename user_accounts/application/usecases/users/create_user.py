"""
===============================================================================
USE CASE: Create User
===============================================================================

Business Goal:
    Open a new account record with an empty balance.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Build a User with balance = 0, debt = 0 and no status.
    - Persist it (the store assigns the id).
    - Return the assigned id.

Collaborators:
    - UserRepository.save(user) -> User

-------------------------------------------------------------------------------
INPUTS / OUTPUTS
-------------------------------------------------------------------------------
Inputs:
    - CreateUserInput(name, surname, age)

Outputs:
    - CreateUserResult(user_id)

BUSINESS RULES
    R1) No validation beyond the input types (age has no range check).
    R2) balance and debt always start at zero, whatever the caller sends.
    R3) status is left unset; activation happens outside this service.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....domain.entities import User
from ....domain.repositories import UserRepository
from .user_results import CreateUserResult


@dataclass(frozen=True)
class CreateUserInput:
    """Input DTO of the use case."""

    name: str
    surname: str
    age: int


class CreateUserUseCase:
    """Command: creates a user record."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, input_data: CreateUserInput) -> CreateUserResult:
        user = User.new(
            name=input_data.name,
            surname=input_data.surname,
            age=input_data.age,
        )
        created = self._users.save(user)
        return CreateUserResult(user_id=created.id)

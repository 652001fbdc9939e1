"""
===============================================================================
USER ACCOUNT USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    User Account Use Case Results

Business Goal:
    Provide shared result and error models for the user account use cases,
    with a stable, explicit contract for:
      - missing records
      - invalid arguments (amounts, insufficient funds)
      - status that forbids the operation
      - writes that lost a concurrent race

Why (Context):
    - Use cases return typed results instead of raising "outwards", which
      keeps caller integration (status mapping) and unit tests simple.
    - A single NOT_FOUND kind carries the id and the operation name, so every
      operation reports a missing record the same way.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    user_results models (module)

Responsibilities:
    - Define UserAccountErrorCode.
    - Represent UserAccountError (code + message + context).
    - Represent results:
        * CreateUserResult (assigned id)
        * UserProfileResult (profile view)
        * DeactivateUserResult (deactivated flag)
        * BalanceResult (new balance after deposit/payment)

Collaborators:
    - domain.value_objects.UserProfile
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ....domain.value_objects import UserProfile


class UserAccountErrorCode(str, Enum):
    """
    Error codes for the user account use cases.

    Codes:
      - NOT_FOUND: no record for the identifier.
      - INVALID_ARGUMENT: non-positive amount or insufficient balance.
      - INVALID_STATE: the record's status forbids the operation.
      - CONFLICT: the record changed between read and write.
    """

    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class UserAccountError:
    """
    Use case error.

    Fields:
      - code: stable category (UserAccountErrorCode)
      - message: human description, useful for UI/logs
      - user_id: identifier the operation targeted (None for create)
      - operation: name of the failing operation (e.g. "deposit")
    """

    code: UserAccountErrorCode
    message: str
    user_id: int | None = None
    operation: str | None = None


@dataclass
class CreateUserResult:
    """
    Result of CreateUser.

    Contract:
      - error is None => user_id holds the id assigned by the store
    """

    user_id: int | None = None
    error: UserAccountError | None = None


@dataclass
class UserProfileResult:
    """
    Result of GetActiveUserProfile.

    Contract:
      - error is None => profile is present
      - error != None => profile is None
    """

    profile: UserProfile | None = None
    error: UserAccountError | None = None


@dataclass
class DeactivateUserResult:
    """Result of DeactivateUser: deactivated=True on success."""

    deactivated: bool
    error: UserAccountError | None = None


@dataclass
class BalanceResult:
    """Result of Deposit / Pay: the balance after the successful write."""

    balance: Decimal | None = None
    error: UserAccountError | None = None


def user_not_found(user_id: int, operation: str) -> UserAccountError:
    """Single NOT_FOUND shape shared by every operation."""
    return UserAccountError(
        code=UserAccountErrorCode.NOT_FOUND,
        message=f"User not found with id: {user_id}",
        user_id=user_id,
        operation=operation,
    )


def concurrent_update(user_id: int, operation: str) -> UserAccountError:
    return UserAccountError(
        code=UserAccountErrorCode.CONFLICT,
        message="User was modified concurrently. Retry the operation.",
        user_id=user_id,
        operation=operation,
    )

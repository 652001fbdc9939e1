"""
===============================================================================
USER ACCOUNT USE CASES PACKAGE (Public API / Exports)
===============================================================================

Name:
    User Account Use Cases (package exports)

Why:
    - Single, stable import point for the account operations, their input
      DTOs and their result/error models.
    - Moving internal files does not break consumers while this module keeps
      the same public interface.
===============================================================================
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------
from .create_user import CreateUserInput, CreateUserUseCase
from .deactivate_user import DeactivateUserUseCase
from .deposit import DepositUseCase
from .get_active_user_profile import GetActiveUserProfileUseCase
from .pay import PayUseCase

# -----------------------------------------------------------------------------
# DTOs / Result models
# -----------------------------------------------------------------------------
from .user_results import (
    BalanceResult,
    CreateUserResult,
    DeactivateUserResult,
    UserAccountError,
    UserAccountErrorCode,
    UserProfileResult,
)

__all__ = [
    # Use Cases
    "CreateUserInput",
    "CreateUserUseCase",
    "GetActiveUserProfileUseCase",
    "DeactivateUserUseCase",
    "DepositUseCase",
    "PayUseCase",
    # DTOs / Result models
    "CreateUserResult",
    "UserProfileResult",
    "DeactivateUserResult",
    "BalanceResult",
    "UserAccountError",
    "UserAccountErrorCode",
]

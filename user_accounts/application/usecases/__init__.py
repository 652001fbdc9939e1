"""
Use Cases Layer (Business Operations)

This package exposes entry points for business logic, organized by feature.

Structure
---------
usecases/
└── users/      # Account creation, profile read, deactivation, deposit, payment

Usage
-----
    from user_accounts.application.usecases.users import DepositUseCase

Or use the barrel exports from this module:

    from user_accounts.application.usecases import DepositUseCase
"""

from .users import (
    BalanceResult,
    CreateUserInput,
    CreateUserResult,
    CreateUserUseCase,
    DeactivateUserResult,
    DeactivateUserUseCase,
    DepositUseCase,
    GetActiveUserProfileUseCase,
    PayUseCase,
    UserAccountError,
    UserAccountErrorCode,
    UserProfileResult,
)

__all__ = [
    "CreateUserInput",
    "CreateUserUseCase",
    "GetActiveUserProfileUseCase",
    "DeactivateUserUseCase",
    "DepositUseCase",
    "PayUseCase",
    "CreateUserResult",
    "UserProfileResult",
    "DeactivateUserResult",
    "BalanceResult",
    "UserAccountError",
    "UserAccountErrorCode",
]

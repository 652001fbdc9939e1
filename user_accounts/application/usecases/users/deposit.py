"""
===============================================================================
USE CASE: Deposit
===============================================================================

Business Goal:
    Add money to a user's balance.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    DepositUseCase

Responsibilities:
    - Validate the amount before touching the store.
    - Validate existence and status.
    - Persist the increased balance.

Collaborators:
    - UserRepository.find_by_id / save

Error Mapping:
    - INVALID_ARGUMENT: amount missing, not finite, or <= 0
    - NOT_FOUND: no record for user_id
    - INVALID_STATE: status is INACTIVE
    - CONFLICT: the record changed between read and write

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) amount must be > 0 (checked first, for any id).
2) Load user; missing -> NOT_FOUND.
3) INACTIVE -> INVALID_STATE. An unset status is eligible.
4) balance = (balance or 0) + amount; save; log.
===============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ....crosscutting.exceptions import ConcurrentUpdateError
from ....domain.repositories import UserRepository
from .user_results import (
    BalanceResult,
    UserAccountError,
    UserAccountErrorCode,
    concurrent_update,
    user_not_found,
)

logger = logging.getLogger(__name__)

OPERATION = "deposit"


class DepositUseCase:
    """Command: credits a user's balance."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int, amount: Decimal | None) -> BalanceResult:
        if amount is None or not amount.is_finite() or amount <= 0:
            return self._error(
                UserAccountErrorCode.INVALID_ARGUMENT,
                "Deposit amount must be greater than zero.",
                user_id,
            )

        user = self._users.find_by_id(user_id)
        if user is None:
            return BalanceResult(error=user_not_found(user_id, OPERATION))

        if user.is_inactive:
            return self._error(
                UserAccountErrorCode.INVALID_STATE,
                "Cannot deposit to an inactive user.",
                user_id,
            )

        user.credit(amount)
        try:
            saved = self._users.save(user)
        except ConcurrentUpdateError:
            return BalanceResult(error=concurrent_update(user_id, OPERATION))

        new_balance = saved.current_balance
        logger.info(
            "Deposit of %s completed for user with ID %s. New balance: %s",
            amount,
            user_id,
            new_balance,
            extra={"user_id": user_id, "amount": amount, "balance": new_balance},
        )
        return BalanceResult(balance=new_balance)

    @staticmethod
    def _error(
        code: UserAccountErrorCode, message: str, user_id: int
    ) -> BalanceResult:
        return BalanceResult(
            error=UserAccountError(
                code=code, message=message, user_id=user_id, operation=OPERATION
            )
        )

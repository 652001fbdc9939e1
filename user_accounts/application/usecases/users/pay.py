"""
===============================================================================
USE CASE: Pay
===============================================================================

Business Goal:
    Take money out of an active user's balance, never below zero.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    PayUseCase

Responsibilities:
    - Validate the amount before touching the store.
    - Validate existence, status and funds.
    - Persist the decreased balance.

Collaborators:
    - UserRepository.find_by_id / save

Error Mapping:
    - INVALID_ARGUMENT: amount missing, not finite, or <= 0, or balance < amount
    - NOT_FOUND: no record for user_id
    - INVALID_STATE: status is not ACTIVE (INACTIVE or unset)
    - CONFLICT: the record changed between read and write

BUSINESS RULES
    R1) Stricter than Deposit: a user whose status was never set cannot pay.
    R2) A missing stored balance counts as zero.
    R3) Paying exactly the whole balance is allowed (balance ends at 0).
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

OPERATION = "pay"


class PayUseCase:
    """Command: debits a user's balance."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int, amount: Decimal | None) -> BalanceResult:
        if amount is None or not amount.is_finite() or amount <= 0:
            return self._error(
                UserAccountErrorCode.INVALID_ARGUMENT,
                "Payment amount must be greater than zero.",
                user_id,
            )

        user = self._users.find_by_id(user_id)
        if user is None:
            return BalanceResult(error=user_not_found(user_id, OPERATION))

        if not user.is_active:
            return self._error(
                UserAccountErrorCode.INVALID_STATE,
                "Cannot process payment for an inactive user.",
                user_id,
            )

        if user.current_balance < amount:
            return self._error(
                UserAccountErrorCode.INVALID_ARGUMENT,
                "Insufficient balance for payment.",
                user_id,
            )

        user.debit(amount)
        try:
            saved = self._users.save(user)
        except ConcurrentUpdateError:
            return BalanceResult(error=concurrent_update(user_id, OPERATION))

        new_balance = saved.current_balance
        logger.info(
            "Payment of %s completed for user with ID %s. New balance: %s",
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

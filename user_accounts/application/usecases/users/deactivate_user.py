"""
===============================================================================
USE CASE: Deactivate User
===============================================================================

Business Goal:
    Switch an account to INACTIVE so it stops receiving deposits and payments.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    DeactivateUserUseCase

Responsibilities:
    - Validate that the user exists.
    - Reject a user that is already INACTIVE (not idempotent).
    - Persist the whole record with status = INACTIVE.

Collaborators:
    - UserRepository.find_by_id / save

Error Mapping:
    - NOT_FOUND: no record for user_id
    - INVALID_STATE: status is already INACTIVE
    - CONFLICT: the record changed between read and write

BUSINESS RULES
    R1) Only an explicit INACTIVE is rejected. A user whose status was never
        set can be deactivated (unlike the profile read and payments).
===============================================================================
"""

from __future__ import annotations

import logging

from ....crosscutting.exceptions import ConcurrentUpdateError
from ....domain.repositories import UserRepository
from .user_results import (
    DeactivateUserResult,
    UserAccountError,
    UserAccountErrorCode,
    concurrent_update,
    user_not_found,
)

logger = logging.getLogger(__name__)

OPERATION = "deactivate_user"


class DeactivateUserUseCase:
    """Command: marks a user as INACTIVE."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int) -> DeactivateUserResult:
        user = self._users.find_by_id(user_id)
        if user is None:
            return DeactivateUserResult(
                deactivated=False, error=user_not_found(user_id, OPERATION)
            )

        if user.is_inactive:
            return DeactivateUserResult(
                deactivated=False,
                error=UserAccountError(
                    code=UserAccountErrorCode.INVALID_STATE,
                    message="User is already inactive.",
                    user_id=user_id,
                    operation=OPERATION,
                ),
            )

        user.deactivate()
        try:
            self._users.save(user)
        except ConcurrentUpdateError:
            return DeactivateUserResult(
                deactivated=False, error=concurrent_update(user_id, OPERATION)
            )

        logger.info(
            "User with ID %s has been deactivated.",
            user_id,
            extra={"user_id": user_id},
        )
        return DeactivateUserResult(deactivated=True)

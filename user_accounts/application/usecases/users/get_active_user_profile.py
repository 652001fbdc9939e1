"""
===============================================================================
USE CASE: Get Active User Profile
===============================================================================

Business Goal:
    Read the public profile of a user, only while the account is ACTIVE.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    GetActiveUserProfileUseCase

Responsibilities:
    - Load the user.
    - Refuse anything that is not explicitly ACTIVE.
    - Map the record to a UserProfile.

Collaborators:
    - UserRepository.find_by_id(user_id)
    - user_mapper.to_user_profile(user)

Error Mapping:
    - NOT_FOUND: no record for user_id
    - INVALID_STATE: status is INACTIVE or unset
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import UserRepository
from ...user_mapper import to_user_profile
from .user_results import (
    UserAccountError,
    UserAccountErrorCode,
    UserProfileResult,
    user_not_found,
)

OPERATION = "get_active_user_profile"


class GetActiveUserProfileUseCase:
    """Query: returns the profile of an active user."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int) -> UserProfileResult:
        user = self._users.find_by_id(user_id)
        if user is None:
            return UserProfileResult(error=user_not_found(user_id, OPERATION))

        # An unset status is not ACTIVE either.
        if not user.is_active:
            return UserProfileResult(
                error=UserAccountError(
                    code=UserAccountErrorCode.INVALID_STATE,
                    message="User is not active.",
                    user_id=user_id,
                    operation=OPERATION,
                )
            )

        return UserProfileResult(profile=to_user_profile(user))

"""
===============================================================================
CRC CARD — user_accounts/container.py (Composition Root / manual DI)
===============================================================================

Responsibilities:
  - Compose dependencies (repository, use cases) following DIP.
  - Expose one factory per use case for the calling layer.
  - Keep singletons cached with lru_cache.
  - Centralise runtime decisions based on Settings.

Collaborators:
  - user_accounts.crosscutting.config.get_settings
  - user_accounts.domain.repositories.UserRepository (port)
  - user_accounts.infrastructure.* (implementations)
  - user_accounts.application.usecases.users (use cases)

Notes:
  - No business logic in this file.
  - The DB pool is opened lazily, the first time the Postgres store is built.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases.users import (
    CreateUserUseCase,
    DeactivateUserUseCase,
    DepositUseCase,
    GetActiveUserProfileUseCase,
    PayUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import UserRepository
from .infrastructure.db import get_or_init_pool
from .infrastructure.repositories import (
    InMemoryUserRepository,
    PostgresUserRepository,
)

# =============================================================================
# Repositories (singletons)
# =============================================================================


def _ensure_pool():
    """Return the process pool, opening it from Settings on first use."""
    settings = get_settings()
    return get_or_init_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """User Record Store (in-memory in test; Postgres at runtime)."""
    if get_settings().is_test():
        return InMemoryUserRepository()
    return PostgresUserRepository(pool=_ensure_pool())


# =============================================================================
# Use cases (built per call, cheap)
# =============================================================================


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(repository=get_user_repository())


def get_active_user_profile_use_case() -> GetActiveUserProfileUseCase:
    return GetActiveUserProfileUseCase(repository=get_user_repository())


def get_deactivate_user_use_case() -> DeactivateUserUseCase:
    return DeactivateUserUseCase(repository=get_user_repository())


def get_deposit_use_case() -> DepositUseCase:
    return DepositUseCase(repository=get_user_repository())


def get_pay_use_case() -> PayUseCase:
    return PayUseCase(repository=get_user_repository())


def reset_container() -> None:
    """Drop cached singletons (tests / settings reload)."""
    get_user_repository.cache_clear()

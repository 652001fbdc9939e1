"""
===============================================================================
CRC CARD — domain/__init__.py
===============================================================================

Module:
    Domain layer exports (public domain API)

Responsibilities:
    - Centralise exports for clean imports from application/infrastructure.
    - Keep the domain "surface area" stable.

Rules:
    - Only re-exports domain contracts/entities.
    - Never import infrastructure here.
===============================================================================
"""

from .entities import User, UserStatus
from .repositories import UserRepository
from .value_objects import UserProfile

__all__ = [
    # Entities
    "User",
    "UserStatus",
    # Repository Interfaces (Ports)
    "UserRepository",
    # Value Objects
    "UserProfile",
]

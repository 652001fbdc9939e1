"""
Application layer: use cases and mappers orchestrating the domain.
"""

from .user_mapper import to_user_profile

__all__ = ["to_user_profile"]

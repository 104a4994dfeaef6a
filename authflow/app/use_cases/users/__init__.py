"""
User Use Cases

All account-profile business logic.
"""

from .get_profile_use_case import GetProfileUseCase

__all__ = [
    "GetProfileUseCase",
]

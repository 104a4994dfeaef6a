"""
Domain Entities

Each entity in its own file for better maintainability.
"""

from .account import Account, AccountCredentials, AccountProfile

__all__ = [
    "Account",
    "AccountCredentials",
    "AccountProfile",
]

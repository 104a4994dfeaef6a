from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from authflow.domain.entities import Account, AccountCredentials, AccountProfile


class EmailAlreadyExistsError(Exception):
    """Raised by create() when the unique email constraint is violated"""


class IAccountRepository(ABC):
    """
    Account repository interface - application layer

    Two read paths:
    - Public lookups return AccountProfile (no credential or token hashes)
    - get_credentials_by_email returns AccountCredentials and is reserved for login
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AccountProfile]:
        """Get public account fields by normalized email"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[AccountProfile]:
        """Get public account fields by ID"""
        pass

    @abstractmethod
    async def get_credentials_by_email(self, email: str) -> Optional[AccountCredentials]:
        """Get account including credential hash (login path only)"""
        pass

    @abstractmethod
    async def get_by_valid_reset_token(
        self, token_hash: str, now: datetime
    ) -> Optional[AccountProfile]:
        """Get account whose reset token hash matches and expires after now"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> AccountProfile:
        """Create a new account, raising EmailAlreadyExistsError on conflict"""
        pass

    @abstractmethod
    async def set_reset_token(
        self, account_id: UUID, token_hash: str, expires_at: datetime
    ) -> None:
        """Store a reset token hash and expiry, replacing any outstanding token"""
        pass

    @abstractmethod
    async def clear_reset_token(self, account_id: UUID) -> None:
        """Remove any outstanding reset token"""
        pass

    @abstractmethod
    async def consume_reset_token(
        self, token_hash: str, credential_hash: str, now: datetime
    ) -> Optional[AccountProfile]:
        """
        Atomically set a new credential hash and clear the reset token.

        Only applies while the token hash matches and is unexpired.
        Returns None when no account was updated.
        """
        pass

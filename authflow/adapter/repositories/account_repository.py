from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from authflow.app.repositories.account_repository import (
    EmailAlreadyExistsError,
    IAccountRepository,
)
from authflow.domain.entities import Account, AccountCredentials, AccountProfile
from authflow.shared.clock import utc_now


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_one(self, *criteria) -> Optional[Account]:
        stmt = select(Account).where(*criteria).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[AccountProfile]:
        """Get public account fields by normalized email"""
        account = await self._get_one(Account.email == email)
        return account.to_profile() if account else None

    async def get_by_id(self, account_id: UUID) -> Optional[AccountProfile]:
        """Get public account fields by ID"""
        account = await self._get_one(Account.id == account_id)
        return account.to_profile() if account else None

    async def get_credentials_by_email(self, email: str) -> Optional[AccountCredentials]:
        """Get public fields plus credential hash (login path only)"""
        account = await self._get_one(Account.email == email)
        return account.to_credentials() if account else None

    async def get_by_valid_reset_token(
        self, token_hash: str, now: datetime
    ) -> Optional[AccountProfile]:
        """Get account whose reset token hash matches and expires after now"""
        account = await self._get_one(
            Account.reset_token_hash == token_hash,
            Account.reset_token_expires_at > now,
        )
        return account.to_profile() if account else None

    async def create(self, account: Account) -> AccountProfile:
        """Create a new account"""
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise EmailAlreadyExistsError(account.email) from exc
        await self.session.refresh(account)
        return account.to_profile()

    async def set_reset_token(
        self, account_id: UUID, token_hash: str, expires_at: datetime
    ) -> None:
        """Store a reset token hash and expiry in one write"""
        stmt = (
            update(Account)
            .where(Account.id == account_id)
            .values(
                reset_token_hash=token_hash,
                reset_token_expires_at=expires_at,
                updated_at=utc_now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def clear_reset_token(self, account_id: UUID) -> None:
        """Remove any outstanding reset token"""
        stmt = (
            update(Account)
            .where(Account.id == account_id)
            .values(
                reset_token_hash=None,
                reset_token_expires_at=None,
                updated_at=utc_now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def consume_reset_token(
        self, token_hash: str, credential_hash: str, now: datetime
    ) -> Optional[AccountProfile]:
        """
        Set the new credential hash and clear the token in a single UPDATE.

        The WHERE clause re-checks the token hash and expiry, so a concurrent
        consumer that already cleared the token makes this update a no-op.
        """
        account = await self.get_by_valid_reset_token(token_hash, now)
        if account is None:
            return None

        stmt = (
            update(Account)
            .where(
                Account.id == account.id,
                Account.reset_token_hash == token_hash,
                Account.reset_token_expires_at > now,
            )
            .values(
                credential_hash=credential_hash,
                reset_token_hash=None,
                reset_token_expires_at=None,
                updated_at=utc_now(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount != 1:
            return None
        return await self.get_by_id(account.id)

"""
Account Entity

Represents one registered user and the state of their password reset token.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from authflow.shared.clock import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - one registered user.

    Business Rules:
    - Email is unique and stored trimmed and lowercased
    - Password stored as bcrypt hash, never as plaintext
    - Reset token stored only as a SHA-256 hash
    - reset_token_hash and reset_token_expires_at are both set or both NULL
    - Accounts are verified at creation (no separate verification step)
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    credential_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Outstanding password reset token (hash only, never the plaintext)
    reset_token_hash: Optional[str] = Field(default=None, max_length=64)
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    verified: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        CheckConstraint(
            "(reset_token_hash IS NULL) = (reset_token_expires_at IS NULL)",
            name="ck_accounts_reset_token_pair",
        ),
        Index("idx_accounts_reset_token_hash", "reset_token_hash"),
    )

    def to_profile(self) -> "AccountProfile":
        return AccountProfile(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            verified=self.verified,
            created_at=self.created_at,
        )

    def to_credentials(self) -> "AccountCredentials":
        return AccountCredentials(
            profile=self.to_profile(),
            credential_hash=self.credential_hash,
        )


class AccountProfile(SQLModel):
    """Public projection of an account - never carries credential or token hashes"""

    id: UUID
    first_name: str
    last_name: str
    email: str
    verified: bool
    created_at: datetime


class AccountCredentials(SQLModel):
    """Detached login view: public fields plus the credential hash"""

    profile: AccountProfile
    credential_hash: str

"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from authflow.domain.entities import AccountProfile


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - raw registration intent

    Fields are optional so the use case owns the validation order and
    can report missing fields the same way as every other rule.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None


class ResetPasswordCommand(BaseModel):
    """Reset password command - token from the email link plus the new password"""

    token: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public account fields, serialized in camelCase for the frontend"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_profile(cls, profile: AccountProfile) -> "UserInfo":
        return cls(
            id=str(profile.id),
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
        )


class AuthResponse(BaseModel):
    """Response for register, login and reset password - bearer token plus user"""

    success: bool = True
    message: str
    token: str
    user: UserInfo


class MessageResponse(BaseModel):
    """Response carrying only a status message"""

    success: bool = True
    message: str


class VerifyResetTokenResponse(BaseModel):
    """Response for verify reset token - exposes only the email"""

    success: bool = True
    message: str
    email: str


class ProfileResponse(BaseModel):
    """Response for current profile lookup"""

    success: bool = True
    user: UserInfo

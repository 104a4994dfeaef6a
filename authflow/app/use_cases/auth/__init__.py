"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .verify_reset_token_use_case import VerifyResetTokenUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    RegisterCommand,
    ResetPasswordCommand,
    UserInfo,
    AuthResponse,
    MessageResponse,
    VerifyResetTokenResponse,
    ProfileResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "VerifyResetTokenUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ResetPasswordCommand",
    # DTOs - Responses
    "AuthResponse",
    "MessageResponse",
    "VerifyResetTokenResponse",
    "ProfileResponse",
    # DTOs - Nested Models
    "UserInfo",
]

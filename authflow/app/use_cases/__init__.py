"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password reset flows
- users/: Current account profile
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    VerifyResetTokenUseCase,
    ResetPasswordUseCase,
)
from .users import GetProfileUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "VerifyResetTokenUseCase",
    "ResetPasswordUseCase",
    # Users
    "GetProfileUseCase",
]

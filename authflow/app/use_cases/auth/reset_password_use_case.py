"""
Reset Password Use Case

Consumes a reset token and sets a new password.
"""

import logging
from datetime import datetime
from typing import Callable

from authflow.app.services.password_hasher import IPasswordHasher
from authflow.app.services.reset_token_generator import IResetTokenGenerator
from authflow.app.services.settings import ResetSettings
from authflow.app.services.token_issuer import ITokenIssuer
from authflow.app.services.unit_of_work import UnitOfWork
from authflow.shared.clock import utc_now
from authflow.shared.result import Error, Result, Return

from . import errors
from .dtos import AuthResponse, ResetPasswordCommand, UserInfo
from .validation import is_blank, validate_new_password

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for resetting a password with a reset token.

    Business Rules:
    - Token is validated by hashing and comparing with the stored hash
    - Token must not be expired
    - New password must be long enough and match its confirmation
    - New credential hash and token clearing happen in one atomic update,
      so a token can be consumed at most once
    - A fresh bearer token is issued (no separate login step)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_generator: IResetTokenGenerator,
        token_issuer: ITokenIssuer,
        settings: ResetSettings,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_generator = token_generator
        self.token_issuer = token_issuer
        self.settings = settings
        self.clock = clock

    async def execute(self, command: ResetPasswordCommand) -> Result[AuthResponse]:
        """
        Execute reset password use case.

        Args:
            command: Plain text token from the email link and the new password

        Errors:
            - MISSING_FIELDS / PASSWORD_TOO_SHORT / PASSWORD_MISMATCH: bad input
            - INVALID_RESET_TOKEN: token unknown, expired or already used
        """
        if is_blank(command.token) or not command.password or not command.confirm_password:
            return Return.err(
                Error(errors.MISSING_FIELDS, "Token and new password are required")
            )

        password_validation = validate_new_password(
            command.password, command.confirm_password, self.settings.password_min_length
        )
        if password_validation.is_err():
            return Return.err(password_validation.error)

        token_hash = self.token_generator.hash(command.token)

        async with self.uow:
            account = await self.uow.accounts.get_by_valid_reset_token(token_hash, self.clock())
            if account is None:
                return Return.err(errors.INVALID_RESET_TOKEN_ERROR)

            credential_hash = self.password_hasher.hash(command.password)

            # Re-checks token and expiry inside the update itself
            updated = await self.uow.accounts.consume_reset_token(
                token_hash, credential_hash, self.clock()
            )
            if updated is None:
                return Return.err(errors.INVALID_RESET_TOKEN_ERROR)

            await self.uow.commit()

        logger.info(f"Password reset completed for account {updated.id}")

        return Return.ok(
            AuthResponse(
                message="Password reset successfully",
                token=self.token_issuer.issue(updated.id),
                user=UserInfo.from_profile(updated),
            )
        )

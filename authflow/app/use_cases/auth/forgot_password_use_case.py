"""
Forgot Password Use Case

Issues a single-use reset token and emails the reset link.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from authflow.app.services.notifier import INotifier
from authflow.app.services.reset_token_generator import IResetTokenGenerator
from authflow.app.services.settings import ResetSettings
from authflow.app.services.unit_of_work import UnitOfWork
from authflow.shared.clock import utc_now
from authflow.shared.email_address import normalize_email
from authflow.shared.result import Error, Result, Return

from . import errors
from .dtos import MessageResponse
from .validation import is_blank, validate_email

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "If this email exists in our system, a reset link has been sent"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset link.

    Business Rules:
    - No email enumeration: unknown and known emails get the same response
    - Token is 256 bits from the CSPRNG; only its SHA-256 hash is persisted
    - Token expires after ResetSettings.token_expire_minutes (default 15)
    - A new request replaces any outstanding token for the account
    - If the email cannot be delivered the token is cleared again and
      the failure is reported
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: IResetTokenGenerator,
        notifier: INotifier,
        settings: ResetSettings,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.notifier = notifier
        self.settings = settings
        self.clock = clock

    async def execute(self, email: str) -> Result[MessageResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Address the user typed into the form

        Returns:
            Result with the generic message, or Error

        Errors:
            - MISSING_FIELDS / INVALID_EMAIL: malformed input
            - EMAIL_DELIVERY_FAILED: the notifier could not send the link
        """
        if is_blank(email):
            return Return.err(Error(errors.MISSING_FIELDS, "Please provide an email address"))

        email_validation = validate_email(email)
        if email_validation.is_err():
            return Return.err(email_validation.error)

        response = MessageResponse(message=GENERIC_MESSAGE)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(normalize_email(email))
            if account is None:
                return Return.ok(response)

            # Plaintext token lives only in memory and in the outgoing email
            reset_token = self.token_generator.generate()
            expires_at = self.clock() + timedelta(minutes=self.settings.token_expire_minutes)

            await self.uow.accounts.set_reset_token(
                account.id, self.token_generator.hash(reset_token), expires_at
            )
            await self.uow.commit()

            delivery = await self.notifier.send_password_reset(
                account.email, reset_token, self.settings.token_expire_minutes
            )
            if delivery.is_err():
                # Compensate: the user never received the token
                await self.uow.accounts.clear_reset_token(account.id)
                await self.uow.commit()
                logger.error(
                    f"Reset email delivery failed for account {account.id}: {delivery.error.code}"
                )
                return Return.err(errors.delivery_failed(delivery.error.code))

        logger.info(f"Password reset requested for account {account.id}")
        return Return.ok(response)

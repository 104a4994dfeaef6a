from datetime import datetime
from typing import Callable

from authflow.app.services.reset_token_generator import IResetTokenGenerator
from authflow.app.services.unit_of_work import UnitOfWork
from authflow.shared.clock import utc_now
from authflow.shared.result import Error, Result, Return

from . import errors
from .dtos import VerifyResetTokenResponse
from .validation import is_blank


class VerifyResetTokenUseCase:
    """
    Read-only check that a reset token is usable.

    Wrong and expired tokens produce the same error. On success only the
    account email is exposed, for display on the reset form.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: IResetTokenGenerator,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.clock = clock

    async def execute(self, token: str) -> Result[VerifyResetTokenResponse]:
        if is_blank(token):
            return Return.err(Error(errors.MISSING_TOKEN, "Reset token is required"))

        async with self.uow:
            account = await self.uow.accounts.get_by_valid_reset_token(
                self.token_generator.hash(token), self.clock()
            )

        if account is None:
            return Return.err(errors.INVALID_RESET_TOKEN_ERROR)

        return Return.ok(
            VerifyResetTokenResponse(message="Reset token is valid", email=account.email)
        )

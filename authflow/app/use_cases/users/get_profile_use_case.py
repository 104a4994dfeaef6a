"""
Get Profile Use Case

Loads the current account from the id carried by the bearer token.
"""

from uuid import UUID

from authflow.app.services.unit_of_work import UnitOfWork
from authflow.app.use_cases.auth.dtos import ProfileResponse, UserInfo
from authflow.app.use_cases.auth import errors
from authflow.shared.result import Error, Result, Return


class GetProfileUseCase:
    """
    Use case for loading the current profile.

    Business Rules:
    - Account id comes from the verified bearer token
    - Only public fields are returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)

        if account is None:
            return Return.err(Error(errors.ACCOUNT_NOT_FOUND, "User not found"))

        return Return.ok(ProfileResponse(user=UserInfo.from_profile(account)))

"""
Login Use Case

Handles credential authentication and bearer token issuance.
"""

from authflow.app.services.password_hasher import IPasswordHasher
from authflow.app.services.token_issuer import ITokenIssuer
from authflow.app.services.unit_of_work import UnitOfWork
from authflow.shared.email_address import normalize_email
from authflow.shared.result import Error, Result, Return

from . import errors
from .dtos import AuthResponse, UserInfo
from .validation import is_blank, validate_email


class LoginUseCase:
    """
    Use case for login.

    Business Rules:
    - Unknown email and wrong password return the same error
    - Constant-time password comparison to prevent timing attacks
    - Credential hash is read through the privileged lookup only
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: Account email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error
        """
        if is_blank(email) or not password:
            return Return.err(Error(errors.MISSING_FIELDS, "Email and password are required"))

        email_validation = validate_email(email)
        if email_validation.is_err():
            return Return.err(email_validation.error)

        async with self.uow:
            credentials = await self.uow.accounts.get_credentials_by_email(normalize_email(email))

            if credentials is None:
                # Hash anyway so response time does not reveal whether the email exists
                self.password_hasher.burn(password)
                return Return.err(errors.INVALID_CREDENTIALS_ERROR)

            if not self.password_hasher.verify(password, credentials.credential_hash):
                return Return.err(errors.INVALID_CREDENTIALS_ERROR)

        profile = credentials.profile
        return Return.ok(
            AuthResponse(
                message="Login successful",
                token=self.token_issuer.issue(profile.id),
                user=UserInfo.from_profile(profile),
            )
        )

import logging

from authflow.app.repositories.account_repository import EmailAlreadyExistsError
from authflow.app.services.password_hasher import IPasswordHasher
from authflow.app.services.settings import ResetSettings
from authflow.app.services.token_issuer import ITokenIssuer
from authflow.app.services.unit_of_work import UnitOfWork
from authflow.domain.entities import Account
from authflow.shared.email_address import normalize_email
from authflow.shared.result import Error, Result, Return

from . import errors
from .dtos import AuthResponse, RegisterCommand, UserInfo
from .validation import is_blank, validate_email, validate_new_password

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (raw registration intent)
    - Output: Result[AuthResponse] (bearer token + public account fields)

    Validation order, first failure wins:
    1. All fields present
    2. Email well-formed
    3. Password long enough
    4. Password matches confirmation
    5. Email not already registered (conflict)

    The account is created verified; no partial account survives a failure.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        settings: ResetSettings,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.settings = settings

    def _validate(self, command: RegisterCommand) -> Result[None]:
        if (
            is_blank(command.first_name)
            or is_blank(command.last_name)
            or is_blank(command.email)
            or not command.password
            or not command.confirm_password
        ):
            return Return.err(Error(errors.MISSING_FIELDS, "All fields are required"))

        email_validation = validate_email(command.email)
        if email_validation.is_err():
            return email_validation

        return validate_new_password(
            command.password, command.confirm_password, self.settings.password_min_length
        )

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        validation = self._validate(command)
        if validation.is_err():
            return Return.err(validation.error)

        email = normalize_email(command.email)
        conflict = Error(errors.EMAIL_ALREADY_EXISTS, "Email already registered")

        async with self.uow:
            existing = await self.uow.accounts.get_by_email(email)
            if existing is not None:
                return Return.err(conflict)

            account = Account(
                first_name=command.first_name.strip(),
                last_name=command.last_name.strip(),
                email=email,
                credential_hash=self.password_hasher.hash(command.password),
                verified=True,
            )
            try:
                profile = await self.uow.accounts.create(account)
            except EmailAlreadyExistsError:
                # Lost a race with a concurrent registration
                return Return.err(conflict)

            await self.uow.commit()

        logger.info(f"Account registered: {profile.id}")

        return Return.ok(
            AuthResponse(
                message="User registered successfully",
                token=self.token_issuer.issue(profile.id),
                user=UserInfo.from_profile(profile),
            )
        )

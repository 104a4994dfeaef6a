from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from authflow.api.error import ClientError, ServerError
from authflow.app.services.notifier import INotifier
from authflow.app.services.password_hasher import IPasswordHasher
from authflow.app.services.reset_token_generator import IResetTokenGenerator
from authflow.app.services.settings import ResetSettings
from authflow.app.services.token_issuer import ITokenIssuer
from authflow.app.services.unit_of_work import UnitOfWork
from authflow.app.use_cases.auth import (
    RegisterCommand,
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    VerifyResetTokenUseCase,
    ResetPasswordCommand,
    ResetPasswordUseCase,
    AuthResponse,
    MessageResponse,
    VerifyResetTokenResponse,
    ProfileResponse,
)
from authflow.app.use_cases.auth import errors
from authflow.app.use_cases.users import GetProfileUseCase
from authflow.depends import (
    get_current_account_id,
    get_notifier,
    get_password_hasher,
    get_reset_settings,
    get_token_generator,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

VALIDATION_ERRORS = (
    errors.MISSING_FIELDS,
    errors.MISSING_TOKEN,
    errors.INVALID_EMAIL,
    errors.PASSWORD_TOO_SHORT,
    errors.PASSWORD_TOO_LONG,
    errors.PASSWORD_MISMATCH,
)


class CamelRequest(BaseModel):
    """Request payloads arrive in camelCase from the frontend"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelRequest):
    """
    Register HTTP request payload

    Presence and format rules are enforced by RegisterUseCase so that
    they are reported in a fixed order.
    """

    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Password (min 6 chars)")
    confirm_password: Optional[str] = Field(None, description="Password confirmation")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    settings: ResetSettings = Depends(get_reset_settings),
):
    """
    Register a new account

    Returns a bearer token and the public account fields.

    Raises:
        - 400 Bad Request: Missing fields, invalid email, weak or mismatched password
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(**request.model_dump())

    use_case = RegisterUseCase(uow, password_hasher, token_issuer, settings)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS:
            raise ClientError(error)
        if error.code == errors.EMAIL_ALREADY_EXISTS:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(CamelRequest):
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
):
    """
    Login with email and password

    Raises:
        - 400 Bad Request: Missing fields or invalid email
        - 401 Unauthorized: Invalid credentials (same for unknown email and wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher, token_issuer)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS:
            raise ClientError(error)
        if error.code == errors.INVALID_CREDENTIALS:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(CamelRequest):
    email: Optional[str] = Field(None, description="Email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_generator: IResetTokenGenerator = Depends(get_token_generator),
    notifier: INotifier = Depends(get_notifier),
    settings: ResetSettings = Depends(get_reset_settings),
):
    """
    Send a password reset link

    Security:
        - No email enumeration (same response for known and unknown emails)
        - Token is 256 bits, stored only as a SHA-256 hash
        - Token is cleared again if the email cannot be delivered

    Raises:
        - 400 Bad Request: Missing or invalid email
        - 500 Internal Server Error: Email delivery failed
    """
    use_case = ForgotPasswordUseCase(uow, token_generator, notifier, settings)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS:
            raise ClientError(error)
        raise ServerError(error)

    return result.value


class VerifyResetTokenRequest(CamelRequest):
    token: Optional[str] = Field(None, description="Password reset token from email")


@router.post(
    "/verify-reset-token", status_code=status.HTTP_200_OK, response_model=VerifyResetTokenResponse
)
async def verify_reset_token(
    request: VerifyResetTokenRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_generator: IResetTokenGenerator = Depends(get_token_generator),
):
    """
    Check a reset token before showing the reset form

    Raises:
        - 400 Bad Request: Missing, invalid or expired token
    """
    use_case = VerifyResetTokenUseCase(uow, token_generator)
    result = await use_case.execute(request.token)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS or error.code == errors.INVALID_RESET_TOKEN:
            raise ClientError(error)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(CamelRequest):
    token: Optional[str] = Field(None, description="Password reset token from email")
    password: Optional[str] = Field(None, description="New password (min 6 chars)")
    confirm_password: Optional[str] = Field(None, description="New password confirmation")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_generator: IResetTokenGenerator = Depends(get_token_generator),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    settings: ResetSettings = Depends(get_reset_settings),
):
    """
    Reset password with a reset token

    Consumes the token and signs the user in with a fresh bearer token.

    Raises:
        - 400 Bad Request: Invalid input, or invalid/expired/used token
        - 500 Internal Server Error: Server error
    """
    command = ResetPasswordCommand(**request.model_dump())

    use_case = ResetPasswordUseCase(uow, password_hasher, token_generator, token_issuer, settings)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in VALIDATION_ERRORS or error.code == errors.INVALID_RESET_TOKEN:
            raise ClientError(error)
        raise ServerError(error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    account_id: UUID = Depends(get_current_account_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current account profile

    Raises:
        - 401 Unauthorized: Missing, invalid or expired bearer token
        - 404 Not Found: Account no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(account_id)

    if result.is_err():
        error = result.error
        if error.code == errors.ACCOUNT_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value

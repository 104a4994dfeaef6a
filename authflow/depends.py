from datetime import timedelta
from functools import lru_cache
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from authflow.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from authflow.adapter.services.secure_reset_token_generator import SecureResetTokenGenerator
from authflow.adapter.services.smtp_notifier import SmtpNotifier, SmtpSettings
from authflow.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from authflow.api.utils.jwt import JwtTokenIssuer
from authflow.app.services.notifier import INotifier
from authflow.app.services.password_hasher import IPasswordHasher
from authflow.app.services.reset_token_generator import IResetTokenGenerator
from authflow.app.services.settings import ResetSettings
from authflow.app.services.token_issuer import ITokenIssuer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_token_generator() -> IResetTokenGenerator:
    return SecureResetTokenGenerator()


@lru_cache
def get_token_issuer() -> ITokenIssuer:
    return JwtTokenIssuer(
        secret=ApplicationConfig.JWT_SECRET,
        expires_delta=timedelta(days=ApplicationConfig.JWT_EXPIRE_DAYS),
    )


@lru_cache
def get_reset_settings() -> ResetSettings:
    return ResetSettings(
        token_expire_minutes=ApplicationConfig.RESET_TOKEN_EXPIRE_MINUTES,
        password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
    )


@lru_cache
def get_notifier() -> INotifier:
    return SmtpNotifier(
        SmtpSettings(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            username=ApplicationConfig.SMTP_USER,
            password=ApplicationConfig.SMTP_PASSWORD,
            from_email=ApplicationConfig.EMAIL_FROM,
            frontend_url=ApplicationConfig.FRONTEND_URL,
            use_ssl=ApplicationConfig.SMTP_USE_SSL,
            use_starttls=ApplicationConfig.SMTP_USE_STARTTLS,
            timeout=ApplicationConfig.SMTP_TIMEOUT,
        )
    )


async def get_current_account_id(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
) -> UUID:
    """
    Dependency to extract and verify the bearer token from the Authorization header.

    Returns:
        Account id carried by the token

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token provided",
        )

    account_id = token_issuer.verify(credentials.credentials)
    if account_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return account_id

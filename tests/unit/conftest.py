import pytest
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

from authflow.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from authflow.adapter.services.secure_reset_token_generator import SecureResetTokenGenerator
from authflow.api.utils.jwt import JwtTokenIssuer
from authflow.app.services.settings import ResetSettings


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the account repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_credentials_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_valid_reset_token = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock()
    uow.accounts.set_reset_token = AsyncMock()
    uow.accounts.clear_reset_token = AsyncMock()
    uow.accounts.consume_reset_token = AsyncMock(return_value=None)
    return uow


@pytest.fixture
def password_hasher():
    # Low cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_generator():
    return SecureResetTokenGenerator()


@pytest.fixture
def token_issuer():
    return JwtTokenIssuer(secret="unit-test-secret", expires_delta=timedelta(days=7))


@pytest.fixture
def reset_settings():
    return ResetSettings(token_expire_minutes=15, password_min_length=6)

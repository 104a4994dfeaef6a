"""
Unit tests for RegisterUseCase

Tests validation order and account creation with mocked dependencies.
"""
from datetime import datetime
from uuid import uuid4

import pytest

from authflow.app.repositories.account_repository import EmailAlreadyExistsError
from authflow.app.use_cases.auth import RegisterCommand, RegisterUseCase
from authflow.domain.entities import AccountProfile


def make_command(**overrides) -> RegisterCommand:
    fields = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@x.com",
        "password": "secret1",
        "confirm_password": "secret1",
    }
    fields.update(overrides)
    return RegisterCommand(**fields)


@pytest.fixture
def use_case(mock_uow, password_hasher, token_issuer, reset_settings):
    async def create(account):
        return account.to_profile()

    mock_uow.accounts.create.side_effect = create
    return RegisterUseCase(mock_uow, password_hasher, token_issuer, reset_settings)


@pytest.mark.asyncio
async def test_successful_registration(use_case, mock_uow, password_hasher, token_issuer):
    """Creates a verified account with a hashed password and returns a token"""
    result = await use_case.execute(make_command())

    assert result.is_ok()
    data = result.value
    assert data.success is True
    assert data.user.first_name == "Jane"
    assert data.user.email == "jane@x.com"
    assert token_issuer.verify(data.token) is not None
    assert str(token_issuer.verify(data.token)) == data.user.id

    mock_uow.accounts.create.assert_called_once()
    created = mock_uow.accounts.create.call_args.args[0]
    assert created.verified is True
    assert created.credential_hash != "secret1"
    assert password_hasher.verify("secret1", created.credential_hash)

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_email_is_normalized_and_names_trimmed(use_case, mock_uow):
    result = await use_case.execute(
        make_command(first_name="  Jane ", last_name=" Doe", email="  Jane@X.COM ")
    )

    assert result.is_ok()
    mock_uow.accounts.get_by_email.assert_called_once_with("jane@x.com")
    created = mock_uow.accounts.create.call_args.args[0]
    assert created.email == "jane@x.com"
    assert created.first_name == "Jane"
    assert created.last_name == "Doe"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["first_name", "last_name", "email", "password", "confirm_password"])
async def test_missing_field(use_case, mock_uow, missing):
    result = await use_case.execute(make_command(**{missing: None}))

    assert result.is_err()
    assert result.error.code == "MISSING_FIELDS"
    assert result.error.message == "All fields are required"
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_blank_name_counts_as_missing(use_case):
    result = await use_case.execute(make_command(first_name="   "))

    assert result.is_err()
    assert result.error.code == "MISSING_FIELDS"


@pytest.mark.asyncio
async def test_invalid_email(use_case, mock_uow):
    result = await use_case.execute(make_command(email="not-an-email"))

    assert result.is_err()
    assert result.error.code == "INVALID_EMAIL"
    mock_uow.accounts.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_password_too_short(use_case):
    result = await use_case.execute(make_command(password="abc", confirm_password="abc"))

    assert result.is_err()
    assert result.error.code == "PASSWORD_TOO_SHORT"
    assert "6 characters" in result.error.message


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["a" * 73, "é" * 37])
async def test_password_over_72_bytes_is_rejected(use_case, mock_uow, password):
    result = await use_case.execute(make_command(password=password, confirm_password=password))

    assert result.is_err()
    assert result.error.code == "PASSWORD_TOO_LONG"
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_password_of_exactly_72_bytes_is_accepted(use_case):
    password = "a" * 72

    result = await use_case.execute(make_command(password=password, confirm_password=password))

    assert result.is_ok()


@pytest.mark.asyncio
async def test_password_mismatch(use_case):
    result = await use_case.execute(make_command(confirm_password="secret2"))

    assert result.is_err()
    assert result.error.code == "PASSWORD_MISMATCH"


@pytest.mark.asyncio
async def test_first_failing_rule_wins(use_case):
    """Invalid email is reported before the short, mismatched password"""
    result = await use_case.execute(
        make_command(email="bad", password="abc", confirm_password="xyz")
    )

    assert result.error.code == "INVALID_EMAIL"

    result = await use_case.execute(make_command(password="abc", confirm_password="xyz"))

    assert result.error.code == "PASSWORD_TOO_SHORT"


@pytest.mark.asyncio
async def test_email_already_registered(use_case, mock_uow):
    mock_uow.accounts.get_by_email.return_value = AccountProfile(
        id=uuid4(),
        first_name="Jane",
        last_name="Doe",
        email="jane@x.com",
        verified=True,
        created_at=datetime.utcnow(),
    )

    result = await use_case.execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.accounts.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_registration_conflict(use_case, mock_uow):
    """Unique constraint violation at insert is reported as the same conflict"""
    mock_uow.accounts.create.side_effect = EmailAlreadyExistsError("jane@x.com")

    result = await use_case.execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.commit.assert_not_called()

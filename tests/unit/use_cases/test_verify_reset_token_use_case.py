from datetime import datetime
from uuid import uuid4

import pytest

from authflow.app.use_cases.auth import VerifyResetTokenUseCase
from authflow.domain.entities import AccountProfile

NOW = datetime(2026, 10, 18, 12, 0, 0)


@pytest.fixture
def use_case(mock_uow, token_generator):
    return VerifyResetTokenUseCase(mock_uow, token_generator, clock=lambda: NOW)


@pytest.mark.asyncio
async def test_valid_token_exposes_only_email(use_case, mock_uow, token_generator):
    mock_uow.accounts.get_by_valid_reset_token.return_value = AccountProfile(
        id=uuid4(),
        first_name="Jane",
        last_name="Doe",
        email="jane@x.com",
        verified=True,
        created_at=NOW,
    )

    result = await use_case.execute("plain-token")

    assert result.is_ok()
    assert result.value.model_dump() == {
        "success": True,
        "message": "Reset token is valid",
        "email": "jane@x.com",
    }
    mock_uow.accounts.get_by_valid_reset_token.assert_called_once_with(
        token_generator.hash("plain-token"), NOW
    )


@pytest.mark.asyncio
async def test_unknown_or_expired_token(use_case, mock_uow):
    result = await use_case.execute("plain-token")

    assert result.is_err()
    assert result.error.code == "INVALID_RESET_TOKEN"
    assert result.error.message == "Invalid or expired reset token"


@pytest.mark.asyncio
async def test_verification_is_read_only(use_case, mock_uow):
    await use_case.execute("plain-token")

    mock_uow.commit.assert_not_called()
    mock_uow.accounts.consume_reset_token.assert_not_called()
    mock_uow.accounts.clear_reset_token.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "   "])
async def test_missing_token(use_case, mock_uow, token):
    result = await use_case.execute(token)

    assert result.is_err()
    assert result.error.code == "MISSING_TOKEN"
    mock_uow.accounts.get_by_valid_reset_token.assert_not_called()

from typing import Optional

from authflow.shared.email_address import is_valid_email
from authflow.shared.result import Result, Return

from . import errors

# bcrypt only reads the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_email(email: str) -> Result[None]:
    if not is_valid_email(email):
        return Return.err(errors.INVALID_EMAIL_ERROR)
    return Return.ok(None)


def validate_new_password(
    password: str, confirm_password: str, min_length: int
) -> Result[None]:
    """
    Validate a new password and its confirmation.

    Length is checked before the confirmation match. The upper bound is
    measured in UTF-8 bytes.
    """
    if len(password) < min_length:
        return Return.err(errors.password_too_short(min_length))

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return Return.err(errors.password_too_long(MAX_PASSWORD_BYTES))

    if password != confirm_password:
        return Return.err(errors.PASSWORD_MISMATCH_ERROR)

    return Return.ok(None)

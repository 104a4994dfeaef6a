"""
Auth error codes and messages

Messages are safe to show to the end user.
"""

from authflow.app.services.notifier import NotificationErrorKind
from authflow.shared.result import Error

MISSING_FIELDS = "MISSING_FIELDS"
INVALID_EMAIL = "INVALID_EMAIL"
PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
PASSWORD_TOO_LONG = "PASSWORD_TOO_LONG"
PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
MISSING_TOKEN = "MISSING_TOKEN"
INVALID_RESET_TOKEN = "INVALID_RESET_TOKEN"
EMAIL_DELIVERY_FAILED = "EMAIL_DELIVERY_FAILED"
ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"

# Same error for unknown email and wrong password
INVALID_CREDENTIALS_ERROR = Error(INVALID_CREDENTIALS, "Invalid email or password")

# Same error for unknown, consumed and expired reset tokens
INVALID_RESET_TOKEN_ERROR = Error(INVALID_RESET_TOKEN, "Invalid or expired reset token")

INVALID_EMAIL_ERROR = Error(INVALID_EMAIL, "Please provide a valid email address")

PASSWORD_MISMATCH_ERROR = Error(PASSWORD_MISMATCH, "Passwords do not match")

DELIVERY_FAILURE_MESSAGES = {
    NotificationErrorKind.authentication_failed: (
        "Email service is not available right now. Please try again later."
    ),
    NotificationErrorKind.connection_failed: (
        "Could not connect to the email service. Please try again later."
    ),
    NotificationErrorKind.timed_out: (
        "The email service took too long to respond. Please try again later."
    ),
    NotificationErrorKind.unknown: "Error sending reset email. Please try again later.",
}


def password_too_short(min_length: int) -> Error:
    return Error(
        PASSWORD_TOO_SHORT,
        f"Password must be at least {min_length} characters long",
    )


def delivery_failed(error_code: str) -> Error:
    try:
        kind = NotificationErrorKind(error_code)
    except ValueError:
        kind = NotificationErrorKind.unknown
    return Error(EMAIL_DELIVERY_FAILED, DELIVERY_FAILURE_MESSAGES[kind])


def password_too_long(max_bytes: int) -> Error:
    return Error(
        PASSWORD_TOO_LONG,
        f"Password must be at most {max_bytes} bytes long",
    )

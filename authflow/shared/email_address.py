from typing import Optional

from email_validator import EmailNotValidError, validate_email


def normalize_email(email: str) -> str:
    """Trim and lowercase an email so registration and lookup agree."""
    return email.strip().lower()


def is_valid_email(email: Optional[str]) -> bool:
    """Syntax-only check, no DNS lookup"""
    if not email:
        return False
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True

from dataclasses import dataclass


@dataclass(frozen=True)
class ResetSettings:
    """Password policy and reset token window used by the auth use cases"""

    token_expire_minutes: int = 15
    password_min_length: int = 6

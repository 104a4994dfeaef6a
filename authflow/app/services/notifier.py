"""
Notifier port

Delivers password reset links. Transport failures are reported as a small
closed set of kinds so callers never depend on transport-specific codes.
"""

from abc import ABC, abstractmethod
from enum import Enum

from authflow.shared.result import Result


class NotificationErrorKind(str, Enum):
    """Why a notification could not be delivered"""

    authentication_failed = "authentication_failed"
    connection_failed = "connection_failed"
    timed_out = "timed_out"
    unknown = "unknown"


class INotifier(ABC):
    @abstractmethod
    async def send_password_reset(
        self, email: str, reset_token: str, expires_in_minutes: int
    ) -> Result[None]:
        """
        Send a reset link embedding the plaintext token.

        Returns:
            Result with None on delivery, or Error whose code is a
            NotificationErrorKind value
        """
        pass

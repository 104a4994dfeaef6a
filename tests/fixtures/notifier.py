from dataclasses import dataclass
from typing import List, Optional

from authflow.app.services.notifier import INotifier, NotificationErrorKind
from authflow.shared.result import Error, Result, Return


@dataclass
class SentResetEmail:
    email: str
    reset_token: str
    expires_in_minutes: int


class RecordingNotifier(INotifier):
    """Keeps reset emails in memory; set fail_with to simulate a transport failure"""

    def __init__(self):
        self.sent: List[SentResetEmail] = []
        self.fail_with: Optional[NotificationErrorKind] = None

    async def send_password_reset(
        self, email: str, reset_token: str, expires_in_minutes: int
    ) -> Result[None]:
        if self.fail_with is not None:
            return Return.err(Error(self.fail_with.value, "simulated delivery failure"))
        self.sent.append(SentResetEmail(email, reset_token, expires_in_minutes))
        return Return.ok(None)

    @property
    def last_token(self) -> str:
        return self.sent[-1].reset_token

"""SMTP delivery of password reset links."""

import asyncio
import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from urllib.parse import urlencode

from authflow.app.services.notifier import INotifier, NotificationErrorKind
from authflow.shared.result import Error, Result, Return

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpSettings:
    """Outbound mail transport, built once at startup from ApplicationConfig"""

    host: str
    port: int = 587
    username: str = ""
    password: str = ""
    from_email: str = ""
    frontend_url: str = "http://localhost:3000"
    use_ssl: bool = False
    use_starttls: bool = True
    timeout: float = 10.0


def build_reset_url(frontend_url: str, reset_token: str) -> str:
    return f"{frontend_url.rstrip('/')}/reset-password?{urlencode({'token': reset_token})}"


def classify_smtp_error(exc: Exception) -> NotificationErrorKind:
    """Map smtplib/socket failures onto NotificationErrorKind"""
    if isinstance(exc, smtplib.SMTPAuthenticationError):
        return NotificationErrorKind.authentication_failed
    if isinstance(exc, TimeoutError):
        return NotificationErrorKind.timed_out
    if isinstance(exc, (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected)):
        return NotificationErrorKind.connection_failed
    if isinstance(exc, smtplib.SMTPException):
        return NotificationErrorKind.unknown
    if isinstance(exc, OSError):
        return NotificationErrorKind.connection_failed
    return NotificationErrorKind.unknown


def _render_bodies(reset_url: str, expires_in_minutes: int) -> tuple[str, str]:
    text_body = (
        "You have requested to reset your password.\n\n"
        f"Open this link to choose a new password:\n{reset_url}\n\n"
        f"This link will expire in {expires_in_minutes} minutes.\n\n"
        "If you did not request a password reset, please ignore this email.\n"
    )
    html_body = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2>Password Reset Request</h2>
  <p>You have requested to reset your password. Click the link below to proceed:</p>
  <p><a href="{reset_url}">Reset Password</a></p>
  <p>Or copy and paste this link in your browser:<br><code>{reset_url}</code></p>
  <p><strong>This link will expire in {expires_in_minutes} minutes.</strong></p>
  <p style="font-size: 12px;">If you did not request a password reset, please ignore this email.</p>
</div>
"""
    return text_body, html_body


class SmtpNotifier(INotifier):
    """INotifier over SMTP, one delivery attempt per call"""

    def __init__(self, settings: SmtpSettings):
        self.settings = settings

    def _send_sync(self, message: EmailMessage) -> None:
        settings = self.settings
        context = ssl.create_default_context()
        if settings.use_ssl:
            smtp_client: smtplib.SMTP = smtplib.SMTP_SSL(
                host=settings.host, port=settings.port, timeout=settings.timeout, context=context
            )
        else:
            smtp_client = smtplib.SMTP(host=settings.host, port=settings.port, timeout=settings.timeout)

        with smtp_client as smtp:
            smtp.ehlo()
            if settings.use_starttls and not settings.use_ssl:
                smtp.starttls(context=context)
                smtp.ehlo()
            if settings.username:
                smtp.login(settings.username, settings.password)
            smtp.send_message(message)

    async def send_password_reset(
        self, email: str, reset_token: str, expires_in_minutes: int
    ) -> Result[None]:
        reset_url = build_reset_url(self.settings.frontend_url, reset_token)
        text_body, html_body = _render_bodies(reset_url, expires_in_minutes)

        message = EmailMessage()
        message["From"] = self.settings.from_email
        message["To"] = email
        message["Subject"] = "Password Reset Request"
        message.set_content(text_body)
        message.add_alternative(html_body, subtype="html")

        try:
            await asyncio.to_thread(self._send_sync, message)
        except Exception as exc:
            kind = classify_smtp_error(exc)
            logger.warning(f"Reset email to {email} failed: {kind.value} ({type(exc).__name__})")
            return Return.err(Error(kind.value, str(exc)))

        logger.info(f"Reset email sent to {email}")
        return Return.ok(None)

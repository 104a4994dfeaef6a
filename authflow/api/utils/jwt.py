from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from authflow.app.services.token_issuer import ITokenIssuer

ALGORITHM = "HS256"


class JwtTokenIssuer(ITokenIssuer):
    """HS256 bearer tokens whose only identity claim is user_id"""

    def __init__(self, secret: str, expires_delta: timedelta = timedelta(days=7)):
        self.secret = secret
        self.expires_delta = expires_delta

    def issue(self, account_id: UUID) -> str:
        """
        Generate JWT access token

        Args:
            account_id: Account UUID

        Returns:
            JWT token string (HS256, expires after expires_delta)
        """
        now = datetime.now(UTC)
        payload = {
            "user_id": str(account_id),
            "exp": now + self.expires_delta,
            "iat": now,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> Optional[dict]:
        """
        Verify and decode JWT token

        Returns:
            Decoded payload dict or None if invalid or expired
        """
        try:
            return jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except JWTError:
            return None

    def verify(self, token: str) -> Optional[UUID]:
        payload = self.decode(token)
        if payload is None or "user_id" not in payload:
            return None
        try:
            return UUID(payload["user_id"])
        except (TypeError, ValueError):
            return None

import hashlib
import secrets

from authflow.app.services.reset_token_generator import IResetTokenGenerator


class SecureResetTokenGenerator(IResetTokenGenerator):
    """
    Reset tokens from the OS CSPRNG.

    - 32 random bytes (256 bits) rendered as 64 hex characters
    - Stored as the SHA-256 hex digest of the plaintext
    """

    TOKEN_BYTES = 32

    def generate(self) -> str:
        return secrets.token_hex(self.TOKEN_BYTES)

    def hash(self, token: str) -> str:
        return hashlib.sha256(token.encode()).hexdigest()

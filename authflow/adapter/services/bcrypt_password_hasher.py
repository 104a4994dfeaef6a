import bcrypt

from authflow.app.services.password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation of IPasswordHasher"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Real hash used to equalize timing when no account matches
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password: str, credential_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), credential_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash or password over bcrypt's 72-byte limit
            return False

    def burn(self, password: str) -> None:
        try:
            bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
        except ValueError:
            # Same failure verify() absorbs, so unknown emails behave alike
            pass

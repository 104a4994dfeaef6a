from abc import ABC, abstractmethod


class IResetTokenGenerator(ABC):
    """Source of reset tokens and their one-way hash"""

    @abstractmethod
    def generate(self) -> str:
        """Return a new high-entropy plaintext token"""
        pass

    @abstractmethod
    def hash(self, token: str) -> str:
        """Return the value persisted in place of the plaintext token"""
        pass

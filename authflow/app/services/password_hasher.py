from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way password hashing with constant-time verification"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, credential_hash: str) -> bool:
        pass

    @abstractmethod
    def burn(self, password: str) -> None:
        """Spend the same time as verify() when there is no hash to check against"""
        pass

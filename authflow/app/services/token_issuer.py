from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class ITokenIssuer(ABC):
    """Issues and verifies signed bearer tokens carrying an account id"""

    @abstractmethod
    def issue(self, account_id: UUID) -> str:
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[UUID]:
        """Return the account id, or None if the token is invalid or expired"""
        pass

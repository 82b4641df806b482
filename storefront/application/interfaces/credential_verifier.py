"""Port for password checks behind the user authentication endpoint."""

from abc import ABC, abstractmethod

from storefront.domain.entities import User


class CredentialVerifier(ABC):
    """Decides whether a password is valid for a given user."""

    @abstractmethod
    def verify(self, user: User, password: str) -> bool:
        ...

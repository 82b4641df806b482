"""Domain entity — storefront user account."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(role.value for role in cls)


@dataclass
class User:
    """Core domain entity for a customer or administrator account.

    ``username`` and ``email`` are unique across the user store, whether
    or not the account is active.
    """

    username: str
    email: str
    first_name: str
    last_name: str
    role: str = UserRole.CUSTOMER.value
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: int = 0

    def collides_with(self, username: str | None, email: str | None) -> bool:
        """True when this user already owns the given username or email."""
        return (username is not None and self.username == username) or (
            email is not None and self.email == email
        )

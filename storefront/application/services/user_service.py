"""Application service (use case) for User operations, including login."""

import logging
import time

from storefront.application.interfaces import CredentialVerifier, RecordStore
from storefront.application.schemas import Credentials, UserCreate, UserUpdate
from storefront.domain.entities import User, UserRole
from storefront.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("username", "email", "firstName", "lastName")
UNIQUE_FIELDS = ("username", "email")
# (attribute, wire name) of the text fields that may not be emptied
TEXT_FIELDS = (
    ("username", "username"),
    ("email", "email"),
    ("first_name", "firstName"),
    ("last_name", "lastName"),
)


class UserService:
    """Orchestrates user CRUD and authentication.

    Password checks are delegated to the injected ``CredentialVerifier`` so
    the demo's fixed password never leaks into the use case itself.
    """

    def __init__(self, store: RecordStore[User], verifier: CredentialVerifier):
        self._store = store
        self._verifier = verifier

    async def list_users(
        self,
        *,
        role: str | None = None,
        active: bool | None = None,
        limit: int | None = None,
    ) -> tuple[list[User], int]:
        filters = {"role": role or None, "is_active": active}
        users = await self._store.list(filters, limit=limit)
        total = await self._store.count(filters)
        return users, total

    async def get_user(self, user_id: int) -> User:
        user = await self._store.get(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def create_user(self, data: UserCreate) -> User:
        if not data.username or not data.email or not data.first_name or not data.last_name:
            raise EntityValidationError.missing("User", REQUIRED_FIELDS)

        role = data.role or UserRole.CUSTOMER.value
        _check_role(role)
        await self._ensure_unique(data.username, data.email)

        user = User(
            username=data.username,
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            role=role,
        )
        created = await self._store.insert(user)
        logger.info("Created user %d (%s)", created.id, created.username)
        return created

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        await self.get_user(user_id)

        # Validate exactly what the store will write.
        fields = {
            name: value
            for name, value in data.model_dump(exclude_unset=True).items()
            if self._store.applies(value)
        }
        blank = tuple(
            wire for name, wire in TEXT_FIELDS if name in fields and not fields[name].strip()
        )
        if blank:
            raise EntityValidationError.blank("User", blank)
        if "role" in fields:
            _check_role(fields["role"])
        await self._ensure_unique(
            fields.get("username"),
            fields.get("email"),
            exclude_id=user_id,
        )

        updated = await self._store.replace(user_id, fields)
        if updated is None:
            raise EntityNotFoundError("User", user_id)
        return updated

    async def delete_user(self, user_id: int) -> User:
        removed = await self._store.remove(user_id)
        if removed is None:
            raise EntityNotFoundError("User", user_id)
        logger.info("Deleted user %d", user_id)
        return removed

    async def authenticate(self, credentials: Credentials) -> tuple[User, str]:
        """Return the matching active user and an opaque session token."""
        if not credentials.username or not credentials.password:
            raise EntityValidationError.missing("User", ("username", "password"))

        user = next(
            (
                u
                for u in await self._store.list()
                if u.username == credentials.username and u.is_active
            ),
            None,
        )
        if user is None or not self._verifier.verify(user, credentials.password):
            logger.info("Rejected login for %r", credentials.username)
            raise AuthenticationError()

        token = f"token_{user.id}_{int(time.time() * 1000)}"
        return user, token

    async def _ensure_unique(
        self,
        username: str | None,
        email: str | None,
        *,
        exclude_id: int | None = None,
    ) -> None:
        if username is None and email is None:
            return
        for user in await self._store.list():
            if user.id != exclude_id and user.collides_with(username, email):
                raise DuplicateEntityError("User", UNIQUE_FIELDS)


def _check_role(role: str) -> None:
    if role not in UserRole.values():
        raise EntityValidationError(
            "User", f"Role must be one of: {', '.join(UserRole.values())}"
        )

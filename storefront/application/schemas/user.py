"""Pydantic DTOs for the User feature. Wire names are camelCase."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class UserCreate(BaseModel):
    """Schema for creating a user. A ``password`` key, if sent, is ignored."""

    model_config = _CAMEL_CONFIG

    username: str | None = Field(None, examples=["alice"])
    email: str | None = Field(None, examples=["alice@example.com"])
    first_name: str | None = Field(None, examples=["Alice"])
    last_name: str | None = Field(None, examples=["Liddell"])
    role: str | None = Field(None, examples=["customer"])


class UserUpdate(BaseModel):
    """Schema for updating an existing user — all fields optional."""

    model_config = _CAMEL_CONFIG

    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    is_active: bool | None = None


class UserSummary(BaseModel):
    """List-view projection — omits ``createdAt``."""

    model_config = _CAMEL_CONFIG

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    is_active: bool


class UserResponse(UserSummary):
    """Detail projection returned by get, create, update and delete."""

    created_at: datetime


class AuthenticatedUser(BaseModel):
    """Reduced projection embedded in a successful login."""

    model_config = _CAMEL_CONFIG

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role: str


class Credentials(BaseModel):
    username: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    user: AuthenticatedUser
    token: str

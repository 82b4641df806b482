"""Envelope and health DTOs shared by both services."""

from datetime import datetime, timezone
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success envelope — ``None`` fields are dropped on the wire."""

    success: bool = True
    data: T | None = None
    total: int | None = None
    message: str | None = None


class ErrorResponse(BaseModel):
    """Failure envelope rendered by the exception handlers."""

    success: bool = False
    message: str


def utc_timestamp() -> str:
    """ISO 8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthResponse(BaseModel):
    """Liveness payload returned by ``GET /health``."""

    success: bool = True
    service: str
    status: Literal["healthy", "unhealthy"] = "healthy"
    timestamp: str = Field(default_factory=utc_timestamp)

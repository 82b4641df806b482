"""Tagged result type for the ``{success, data, total, message}`` envelope.

Consumers branch on ``isinstance(result, Ok)`` instead of probing optional
envelope keys.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful envelope: ``data`` plus the optional ``total`` and ``message``."""

    data: T
    total: int | None = None
    message: str | None = None


@dataclass(frozen=True)
class Err:
    """Failed envelope or transport failure."""

    message: str
    status_code: int
    code: str | None = None


Result = Union[Ok[T], Err]


def parse_envelope(payload: Any, status_code: int = 200) -> Result[Any]:
    """Convert a decoded JSON envelope into ``Ok`` or ``Err``."""
    if not isinstance(payload, dict):
        return Err(message="Malformed response envelope", status_code=status_code)
    if payload.get("success") is False:
        return Err(
            message=payload.get("message") or "Request failed",
            status_code=status_code if status_code >= 400 else 500,
        )
    return Ok(
        data=payload.get("data"),
        total=payload.get("total"),
        message=payload.get("message"),
    )

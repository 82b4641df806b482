"""Domain-specific exceptions — framework-independent."""

from enum import Enum


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity.

    ``fields`` lists the unique fields that were checked, e.g.
    ``("username", "email")`` renders as "Username or email already exists".
    """

    def __init__(self, entity_type: str, fields: tuple[str, ...]):
        self.entity_type = entity_type
        self.fields = fields
        joined = " or ".join(fields)
        super().__init__(f"{joined[:1].upper()}{joined[1:]} already exists")


class EntityValidationError(Exception):
    """Raised when a payload is missing required fields or carries invalid values."""

    def __init__(self, entity_type: str, message: str):
        self.entity_type = entity_type
        self.message = message
        super().__init__(message)

    @classmethod
    def missing(cls, entity_type: str, fields: tuple[str, ...]) -> "EntityValidationError":
        """Build the "<A>, <b>, and <c> are required" error for a set of fields."""
        return cls(entity_type, f"{human_join(fields)} are required")

    @classmethod
    def blank(cls, entity_type: str, fields: tuple[str, ...]) -> "EntityValidationError":
        """Build the "<A> and <b> must not be empty" error for blank text fields."""
        return cls(entity_type, f"{human_join(fields)} must not be empty")


class AuthenticationError(Exception):
    """Raised when credentials do not match an active user."""

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(message)


def human_join(fields: tuple[str, ...]) -> str:
    """Join field names as prose: ``Name, price, and category``."""
    names = list(fields)
    if not names:
        return ""
    names[0] = names[0][:1].upper() + names[0][1:]
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{', '.join(names[:-1])}, and {names[-1]}"


class ApiErrorCode(str, Enum):
    """Client-side failure classes reported by the service gateway."""

    TIMEOUT = "TIMEOUT"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    HTTP_ERROR = "HTTP_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ApiError(Exception):
    """Raised by the client gateway when a call to a service fails.

    ``status_code`` is the HTTP status for server responses; timeouts and
    unreachable services use 408 and 503 even though no response arrived.
    """

    def __init__(self, message: str, status_code: int, code: ApiErrorCode):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(f"[{code.value}] {status_code}: {message}")

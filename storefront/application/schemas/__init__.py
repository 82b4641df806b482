from .common import ApiResponse, ErrorResponse, HealthResponse, utc_timestamp
from .product import ProductCreate, ProductUpdate, ProductResponse
from .user import (
    UserCreate,
    UserUpdate,
    UserSummary,
    UserResponse,
    AuthenticatedUser,
    Credentials,
    AuthResponse,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "HealthResponse",
    "utc_timestamp",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "UserCreate",
    "UserUpdate",
    "UserSummary",
    "UserResponse",
    "AuthenticatedUser",
    "Credentials",
    "AuthResponse",
]

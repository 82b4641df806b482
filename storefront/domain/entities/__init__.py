from .product import Product
from .user import User, UserRole

__all__ = [
    "Product",
    "User",
    "UserRole",
]

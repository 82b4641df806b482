from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "ProductService",
    "UserService",
]

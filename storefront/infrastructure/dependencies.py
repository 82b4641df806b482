"""FastAPI dependency injection — wires infrastructure to application layer.

Each app instance owns its stores on ``app.state``; services are built per
request around them.
"""

from collections.abc import AsyncGenerator

from fastapi import Request

from storefront.application.services import ProductService, UserService
from storefront.config import Settings
from storefront.domain.entities import Product, User
from storefront.infrastructure.auth import StaticPasswordVerifier
from storefront.infrastructure.store import InMemoryRecordStore, seed_products, seed_users


def build_product_store(settings: Settings) -> InMemoryRecordStore[Product]:
    """A fresh, seeded product store."""
    return InMemoryRecordStore(
        "Product",
        seed=seed_products(),
        update_mode=settings.partial_update_mode,
    )


def build_user_store(settings: Settings) -> InMemoryRecordStore[User]:
    """A fresh, seeded user store."""
    return InMemoryRecordStore(
        "User",
        seed=seed_users(),
        update_mode=settings.partial_update_mode,
    )


def build_credential_verifier(settings: Settings) -> StaticPasswordVerifier:
    return StaticPasswordVerifier(settings.demo_password)


async def get_product_service(request: Request) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService bound to this app's product store."""
    yield ProductService(request.app.state.product_store)


async def get_user_service(request: Request) -> AsyncGenerator[UserService, None]:
    """Provides a UserService bound to this app's user store and verifier."""
    yield UserService(
        request.app.state.user_store,
        request.app.state.credential_verifier,
    )

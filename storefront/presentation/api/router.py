"""Per-service routers — each service mounts its resource router next to /health."""

from fastapi import APIRouter

from storefront.presentation.api.endpoints.health import router as health_router
from storefront.presentation.api.endpoints.products import router as products_router
from storefront.presentation.api.endpoints.users import router as users_router

product_router = APIRouter()
product_router.include_router(health_router)
product_router.include_router(products_router)

user_router = APIRouter()
user_router.include_router(health_router)
user_router.include_router(users_router)

"""FastAPI application factories for the product and user services."""

import argparse
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.application.interfaces import CredentialVerifier, RecordStore
from storefront.config import Settings, get_settings
from storefront.domain.entities import Product, User
from storefront.infrastructure.dependencies import (
    build_credential_verifier,
    build_product_store,
    build_user_store,
)
from storefront.infrastructure.logging.log_config import setup_logging
from storefront.presentation.api.error_handlers import register_error_handlers
from storefront.presentation.api.router import product_router, user_router

logger = logging.getLogger(__name__)


def _lifespan(service_name: str) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan — configure logging and list the mounted routes."""
        setup_logging()
        logger.info("%s starting", service_name)
        for route in app.routes:
            methods = ",".join(sorted(getattr(route, "methods", None) or ()))
            if methods and not route.path.startswith(("/docs", "/openapi", "/redoc")):
                logger.info("  %-12s %s", methods, route.path)
        yield
        logger.info("%s stopped", service_name)

    return lifespan


def _build_app(settings: Settings, service_name: str, router: APIRouter) -> FastAPI:
    app = FastAPI(
        title=service_name,
        version=settings.app_version,
        lifespan=_lifespan(service_name),
    )
    app.state.service_name = service_name

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)
    return app


def create_product_app(
    store: RecordStore[Product] | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the product service. A fresh seeded store is created unless one is injected."""
    settings = settings or get_settings()
    app = _build_app(settings, settings.product_service_name, product_router)
    app.state.product_store = store if store is not None else build_product_store(settings)
    return app


def create_user_app(
    store: RecordStore[User] | None = None,
    verifier: CredentialVerifier | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the user service with its store and credential verifier."""
    settings = settings or get_settings()
    app = _build_app(settings, settings.user_service_name, user_router)
    app.state.user_store = store if store is not None else build_user_store(settings)
    app.state.credential_verifier = (
        verifier if verifier is not None else build_credential_verifier(settings)
    )
    return app


product_app = create_product_app()
user_app = create_user_app()


def main(argv: list[str] | None = None) -> None:
    import uvicorn

    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run a storefront demo service.")
    parser.add_argument("service", choices=["products", "users"])
    parser.add_argument("--host", default=settings.service_host)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    if args.service == "products":
        target, port = "storefront.main:product_app", settings.product_service_port
    else:
        target, port = "storefront.main:user_app", settings.user_service_port

    uvicorn.run(target, host=args.host, port=args.port or port)


if __name__ == "__main__":
    main()

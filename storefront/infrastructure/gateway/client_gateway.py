"""Client gateway — one entry point bundling both service APIs and the health monitor."""

from collections.abc import Sequence

import httpx

from storefront.config import Settings, get_settings
from storefront.infrastructure.gateway.health_monitor import DEFAULT_INTERVAL, HealthMonitor
from storefront.infrastructure.gateway.http_client import ServiceHttpClient
from storefront.infrastructure.gateway.service_apis import ProductApi, UserApi


class ClientGateway:
    """Typed access to the product and user services.

    Clients listed in ``owned_clients`` are closed by ``aclose``.

    Usage:
        async with ClientGateway.from_settings() as gateway:
            products = await gateway.products.list_products(category="home")
            snapshot = await gateway.health.check_all()
    """

    def __init__(
        self,
        product_client: ServiceHttpClient,
        user_client: ServiceHttpClient,
        owned_clients: Sequence[httpx.AsyncClient] = (),
        health_check_interval: float = DEFAULT_INTERVAL,
    ):
        self.products = ProductApi(product_client)
        self.users = UserApi(user_client)
        self.health = HealthMonitor(self.products, self.users, interval=health_check_interval)
        self._owned_clients = tuple(owned_clients)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "ClientGateway":
        """Build a gateway from configured service URLs, timeout and polling interval.

        When ``http_client`` is omitted a pooled client is created and owned
        by the gateway; close it with ``aclose`` or ``async with``.
        """
        settings = settings or get_settings()
        shared = http_client or httpx.AsyncClient(timeout=settings.gateway_timeout)
        return cls(
            ServiceHttpClient(settings.product_service_url, settings.gateway_timeout, shared),
            ServiceHttpClient(settings.user_service_url, settings.gateway_timeout, shared),
            owned_clients=(shared,) if http_client is None else (),
            health_check_interval=settings.health_check_interval,
        )

    async def aclose(self) -> None:
        await self.health.stop_auto_check()
        for client in self._owned_clients:
            await client.aclose()

    async def __aenter__(self) -> "ClientGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

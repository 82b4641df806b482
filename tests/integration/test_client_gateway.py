"""End-to-end tests for the client gateway against in-process services."""

import httpx
import pytest

from storefront.application.schemas import ProductCreate, UserUpdate
from storefront.config import Settings
from storefront.domain.result import Err, Ok
from storefront.infrastructure.gateway import ClientGateway, ServiceHttpClient, capture
from storefront.main import create_product_app, create_user_app


def _asgi_transport(app) -> httpx.AsyncBaseTransport:
    return httpx.ASGITransport(app=app)


def _down_transport() -> httpx.AsyncBaseTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


def _gateway(product_transport=None, user_transport=None) -> ClientGateway:
    """A gateway that owns one client per service and closes them on exit."""
    product_http = httpx.AsyncClient(transport=product_transport or _asgi_transport(create_product_app()))
    user_http = httpx.AsyncClient(transport=user_transport or _asgi_transport(create_user_app()))
    return ClientGateway(
        ServiceHttpClient("http://products.test", http_client=product_http),
        ServiceHttpClient("http://users.test", http_client=user_http),
        owned_clients=(product_http, user_http),
    )


@pytest.mark.asyncio
async def test_list_and_create_products():
    async with _gateway() as gateway:
        listed = await gateway.products.list_products(category="home")
        created = await gateway.products.create_product(
            ProductCreate(name="Mug", price=9.99, category="Home")
        )

    assert [p.name for p in listed.data] == ["Coffee Maker"]
    assert listed.total == 1
    assert created.data.id == 5
    assert created.message == "Product created successfully"


@pytest.mark.asyncio
async def test_missing_product_is_err():
    async with _gateway() as gateway:
        result = await capture(gateway.products.get_product(404))

    assert isinstance(result, Err)
    assert result.status_code == 404
    assert result.message == "Product not found"


@pytest.mark.asyncio
async def test_user_round_trip():
    async with _gateway() as gateway:
        updated = await gateway.users.update_user(2, UserUpdate(first_name="Janet"))
        fetched = await gateway.users.get_user(2)
        login = await capture(gateway.users.authenticate("jane_smith", "password123"))

    assert updated.data.first_name == "Janet"
    assert fetched.data.first_name == "Janet"
    assert isinstance(login, Ok)
    assert login.data.token.startswith("token_2_")


@pytest.mark.asyncio
async def test_failed_login_is_err():
    async with _gateway() as gateway:
        result = await capture(gateway.users.authenticate("jane_smith", "nope"))

    assert isinstance(result, Err)
    assert result.status_code == 401
    assert result.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_health_all_services_up():
    async with _gateway() as gateway:
        snapshot = await gateway.health.check_all()

    assert snapshot.all_healthy
    assert snapshot.product_service.details.service == "Product Service"
    assert snapshot.user_service.details.service == "User Service"


@pytest.mark.asyncio
async def test_health_with_one_service_down():
    async with _gateway(user_transport=_down_transport()) as gateway:
        snapshot = await gateway.health.check_all()

    assert snapshot.product_service.healthy
    assert not snapshot.user_service.healthy
    assert snapshot.error == "User Service: unhealthy"


@pytest.mark.asyncio
async def test_unreachable_service_is_503():
    async with _gateway(_down_transport(), _down_transport()) as gateway:
        result = await capture(gateway.products.list_products())

    assert isinstance(result, Err)
    assert result.status_code == 503
    assert result.code == "SERVICE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_exit_closes_owned_clients_and_stops_polling():
    product_http = httpx.AsyncClient(transport=_asgi_transport(create_product_app()))
    user_http = httpx.AsyncClient(transport=_down_transport())
    gateway = ClientGateway(
        ServiceHttpClient("http://products.test", http_client=product_http),
        ServiceHttpClient("http://users.test", http_client=user_http),
        owned_clients=(product_http, user_http),
    )
    async with gateway:
        await gateway.health.start_auto_check(interval=60)
        assert gateway.health.is_polling

    assert not gateway.health.is_polling
    assert product_http.is_closed
    assert user_http.is_closed


@pytest.mark.asyncio
async def test_from_settings_uses_configured_polling_interval():
    settings = Settings(_env_file=None, health_check_interval=5.0, gateway_timeout=2.5)
    async with ClientGateway.from_settings(settings) as gateway:
        assert gateway.health.interval == 5.0


@pytest.mark.asyncio
async def test_from_settings_leaves_injected_client_open():
    shared = httpx.AsyncClient(transport=_down_transport())
    async with ClientGateway.from_settings(Settings(_env_file=None), http_client=shared):
        pass

    assert not shared.is_closed
    await shared.aclose()

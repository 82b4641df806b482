"""Typed accessors over the product and user services.

Every accessor returns an ``Ok`` wrapping pydantic response models and lets
``ApiError`` propagate. Callers that prefer a value to an exception wrap the
call in ``capture``.
"""

from collections.abc import Awaitable
from typing import Any, TypeVar

from pydantic import BaseModel

from storefront.application.schemas import (
    AuthResponse,
    HealthResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    UserCreate,
    UserResponse,
    UserSummary,
    UserUpdate,
)
from storefront.domain.exceptions import ApiError, ApiErrorCode
from storefront.domain.result import Err, Ok, Result, parse_envelope
from storefront.infrastructure.gateway.http_client import ServiceHttpClient

T = TypeVar("T")


async def capture(call: Awaitable[Ok[T]]) -> Result[T]:
    """Await a gateway call, turning an ``ApiError`` into ``Err``."""
    try:
        return await call
    except ApiError as e:
        return Err(message=e.message, status_code=e.status_code, code=e.code.value)


def _unwrap(payload: Any) -> Ok[Any]:
    result = parse_envelope(payload)
    if isinstance(result, Err):
        # A 2xx response carrying success=false is still a failed call.
        raise ApiError(result.message, result.status_code, ApiErrorCode.UNKNOWN_ERROR)
    return result


def _one(payload: Any, model: type[BaseModel]) -> Ok[Any]:
    result = _unwrap(payload)
    return Ok(
        data=model.model_validate(result.data),
        total=result.total,
        message=result.message,
    )


def _many(payload: Any, model: type[BaseModel]) -> Ok[Any]:
    result = _unwrap(payload)
    items = [model.model_validate(item) for item in result.data or []]
    return Ok(
        data=items,
        total=result.total if result.total is not None else len(items),
        message=result.message,
    )


def _body(data: BaseModel) -> dict[str, Any]:
    return data.model_dump(by_alias=True, exclude_unset=True)


async def _check_health(client: ServiceHttpClient, service_name: str) -> HealthResponse:
    """Never raises — an unreachable or failing service reports ``unhealthy``."""
    try:
        payload = await client.get("/health")
        return HealthResponse.model_validate(payload)
    except (ApiError, ValueError):
        return HealthResponse(success=False, service=service_name, status="unhealthy")


class ProductApi:
    """Product service accessors."""

    service_name = "Product Service"

    def __init__(self, client: ServiceHttpClient):
        self._client = client

    async def list_products(
        self, *, category: str | None = None, limit: int | None = None
    ) -> Ok[list[ProductResponse]]:
        payload = await self._client.get(
            "/products", params={"category": category, "limit": limit}
        )
        return _many(payload, ProductResponse)

    async def get_product(self, product_id: int) -> Ok[ProductResponse]:
        return _one(await self._client.get(f"/products/{product_id}"), ProductResponse)

    async def create_product(self, data: ProductCreate) -> Ok[ProductResponse]:
        return _one(await self._client.post("/products", _body(data)), ProductResponse)

    async def update_product(self, product_id: int, data: ProductUpdate) -> Ok[ProductResponse]:
        payload = await self._client.put(f"/products/{product_id}", _body(data))
        return _one(payload, ProductResponse)

    async def delete_product(self, product_id: int) -> Ok[ProductResponse]:
        return _one(await self._client.delete(f"/products/{product_id}"), ProductResponse)

    async def check_health(self) -> HealthResponse:
        return await _check_health(self._client, self.service_name)


class UserApi:
    """User service accessors."""

    service_name = "User Service"

    def __init__(self, client: ServiceHttpClient):
        self._client = client

    async def list_users(
        self,
        *,
        role: str | None = None,
        active: bool | None = None,
        limit: int | None = None,
    ) -> Ok[list[UserSummary]]:
        params = {
            "role": role,
            "active": None if active is None else str(active).lower(),
            "limit": limit,
        }
        return _many(await self._client.get("/users", params=params), UserSummary)

    async def get_user(self, user_id: int) -> Ok[UserResponse]:
        return _one(await self._client.get(f"/users/{user_id}"), UserResponse)

    async def create_user(self, data: UserCreate) -> Ok[UserResponse]:
        return _one(await self._client.post("/users", _body(data)), UserResponse)

    async def update_user(self, user_id: int, data: UserUpdate) -> Ok[UserResponse]:
        return _one(await self._client.put(f"/users/{user_id}", _body(data)), UserResponse)

    async def delete_user(self, user_id: int) -> Ok[UserResponse]:
        return _one(await self._client.delete(f"/users/{user_id}"), UserResponse)

    async def authenticate(self, username: str, password: str) -> Ok[AuthResponse]:
        payload = await self._client.post(
            "/users/authenticate", {"username": username, "password": password}
        )
        return _one(payload, AuthResponse)

    async def check_health(self) -> HealthResponse:
        return await _check_health(self._client, self.service_name)

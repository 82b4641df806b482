"""HTTP-level tests for the user service."""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.config import Settings
from storefront.main import create_user_app


@pytest.fixture
def app():
    return create_user_app()


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_list_users_omits_created_at(app):
    async with _client(app) as client:
        response = await client.get("/users")

    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 3
    first = body["data"][0]
    assert set(first) == {"id", "username", "email", "firstName", "lastName", "role", "isActive"}


@pytest.mark.asyncio
async def test_list_users_filters(app):
    async with _client(app) as client:
        inactive = await client.get("/users", params={"active": "false"})
        admins = await client.get("/users", params={"role": "ADMIN"})

    assert [u["username"] for u in inactive.json()["data"]] == ["bob_wilson"]
    assert [u["username"] for u in admins.json()["data"]] == ["jane_smith"]


@pytest.mark.asyncio
async def test_get_user_includes_created_at(app):
    async with _client(app) as client:
        response = await client.get("/users/1")

    data = response.json()["data"]
    assert data["username"] == "john_doe"
    assert data["createdAt"].startswith("2024-01-15T10:30:00")


@pytest.mark.asyncio
async def test_get_missing_user(app):
    async with _client(app) as client:
        response = await client.get("/users/77")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "User not found"}


@pytest.mark.asyncio
async def test_create_user(app):
    payload = {
        "username": "alice",
        "email": "alice@example.com",
        "firstName": "Alice",
        "lastName": "Liddell",
        "password": "ignored",
    }
    async with _client(app) as client:
        response = await client.post("/users", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["data"]["id"] == 4
    assert body["data"]["role"] == "customer"
    assert body["data"]["isActive"] is True
    assert "password" not in body["data"]


@pytest.mark.asyncio
async def test_create_duplicate_user(app):
    payload = {
        "username": "john_doe",
        "email": "other@example.com",
        "firstName": "J",
        "lastName": "D",
    }
    async with _client(app) as client:
        response = await client.post("/users", json=payload)

    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "Username or email already exists"}


@pytest.mark.asyncio
async def test_create_user_missing_fields(app):
    async with _client(app) as client:
        response = await client.post("/users", json={"username": "x"})

    assert response.status_code == 400
    assert response.json()["message"] == "Username, email, firstName, and lastName are required"


@pytest.mark.asyncio
async def test_update_user_email_collision(app):
    async with _client(app) as client:
        response = await client.put("/users/1", json={"email": "jane@example.com"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_user(app):
    async with _client(app) as client:
        response = await client.put("/users/1", json={"lastName": "Dough"})

    body = response.json()
    assert body["message"] == "User updated successfully"
    assert body["data"]["lastName"] == "Dough"


@pytest.mark.asyncio
async def test_delete_user(app):
    async with _client(app) as client:
        response = await client.delete("/users/3")
        again = await client.delete("/users/3")

    assert response.json()["data"]["username"] == "bob_wilson"
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_authenticate(app):
    async with _client(app) as client:
        response = await client.post(
            "/users/authenticate", json={"username": "john_doe", "password": "password123"}
        )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Authentication successful"
    assert re.fullmatch(r"token_1_\d+", body["data"]["token"])
    assert set(body["data"]["user"]) == {"id", "username", "email", "firstName", "lastName", "role"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "john_doe", "password": "wrong"},
        {"username": "bob_wilson", "password": "password123"},
        {"username": "nobody", "password": "password123"},
    ],
)
async def test_authenticate_rejected(app, credentials):
    async with _client(app) as client:
        response = await client.post("/users/authenticate", json=credentials)

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


@pytest.mark.asyncio
async def test_authenticate_requires_password(app):
    async with _client(app) as client:
        response = await client.post("/users/authenticate", json={"username": "john_doe"})

    assert response.status_code == 400
    assert response.json()["message"] == "Username and password are required"


def _present_mode_app():
    return create_user_app(settings=Settings(_env_file=None, partial_update_mode="present"))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"role": ""}, "Role must be one of: customer, admin"),
        ({"username": ""}, "Username must not be empty"),
        ({"email": " ", "lastName": ""}, "Email and lastName must not be empty"),
    ],
)
async def test_present_mode_rejects_blank_or_invalid_values(payload, message):
    async with _client(_present_mode_app()) as client:
        response = await client.put("/users/1", json=payload)
        current = await client.get("/users/1")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": message}
    data = current.json()["data"]
    assert (data["username"], data["email"], data["role"]) == ("john_doe", "john@example.com", "customer")


@pytest.mark.asyncio
async def test_present_mode_applies_false_flag():
    async with _client(_present_mode_app()) as client:
        response = await client.put("/users/1", json={"isActive": False})

    assert response.status_code == 200
    assert response.json()["data"]["isActive"] is False


@pytest.mark.asyncio
async def test_truthy_mode_ignores_blank_values(app):
    async with _client(app) as client:
        response = await client.put("/users/1", json={"role": "", "username": ""})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == "john_doe"
    assert data["role"] == "customer"

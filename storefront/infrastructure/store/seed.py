"""Fixed demo records loaded into every freshly built store."""

from datetime import datetime, timezone

from storefront.domain.entities import Product, User, UserRole


def seed_products() -> list[Product]:
    return [
        Product(
            id=1,
            name="Wireless Bluetooth Headphones",
            price=99.99,
            category="Electronics",
            stock=50,
            description="High-quality wireless headphones with noise cancellation",
        ),
        Product(
            id=2,
            name="Smart Watch",
            price=299.99,
            category="Electronics",
            stock=25,
            description="Feature-rich smartwatch with health monitoring",
        ),
        Product(
            id=3,
            name="Running Shoes",
            price=129.99,
            category="Sports",
            stock=100,
            description="Comfortable running shoes for all terrains",
        ),
        Product(
            id=4,
            name="Coffee Maker",
            price=79.99,
            category="Home",
            stock=30,
            description="Automatic drip coffee maker with programmable timer",
        ),
    ]


def seed_users() -> list[User]:
    return [
        User(
            id=1,
            username="john_doe",
            email="john@example.com",
            first_name="John",
            last_name="Doe",
            role=UserRole.CUSTOMER.value,
            created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            is_active=True,
        ),
        User(
            id=2,
            username="jane_smith",
            email="jane@example.com",
            first_name="Jane",
            last_name="Smith",
            role=UserRole.ADMIN.value,
            created_at=datetime(2024, 1, 10, 8, 15, tzinfo=timezone.utc),
            is_active=True,
        ),
        User(
            id=3,
            username="bob_wilson",
            email="bob@example.com",
            first_name="Bob",
            last_name="Wilson",
            role=UserRole.CUSTOMER.value,
            created_at=datetime(2024, 2, 1, 14, 20, tzinfo=timezone.utc),
            is_active=False,
        ),
    ]

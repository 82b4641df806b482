"""Application service (use case) for Product operations."""

import logging

from storefront.application.interfaces import RecordStore
from storefront.application.schemas import ProductCreate, ProductUpdate
from storefront.domain.entities import Product
from storefront.domain.exceptions import EntityNotFoundError, EntityValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "category")


class ProductService:
    """Orchestrates product CRUD logic. Depends on the record store port (DI)."""

    def __init__(self, store: RecordStore[Product]):
        self._store = store

    async def list_products(
        self,
        *,
        category: str | None = None,
        limit: int | None = None,
    ) -> tuple[list[Product], int]:
        """Return the (possibly truncated) page and the pre-limit total."""
        filters = {"category": category or None}
        products = await self._store.list(filters, limit=limit)
        total = await self._store.count(filters)
        return products, total

    async def get_product(self, product_id: int) -> Product:
        product = await self._store.get(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def create_product(self, data: ProductCreate) -> Product:
        if not data.name or not data.price or not data.category:
            raise EntityValidationError.missing("Product", REQUIRED_FIELDS)
        _check_non_negative(price=data.price, stock=data.stock)

        product = Product(
            name=data.name,
            price=float(data.price),
            category=data.category,
            stock=data.stock or 0,
            description=data.description or "",
        )
        created = await self._store.insert(product)
        logger.info("Created product %d (%s)", created.id, created.name)
        return created

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        await self.get_product(product_id)
        _check_non_negative(price=data.price, stock=data.stock)

        fields = {
            name: value
            for name, value in data.model_dump(exclude_unset=True).items()
            if self._store.applies(value)
        }
        blank = tuple(
            name for name in ("name", "category") if name in fields and not fields[name].strip()
        )
        if blank:
            raise EntityValidationError.blank("Product", blank)
        if "price" in fields:
            fields["price"] = float(fields["price"])

        updated = await self._store.replace(product_id, fields)
        if updated is None:
            raise EntityNotFoundError("Product", product_id)
        return updated

    async def delete_product(self, product_id: int) -> Product:
        removed = await self._store.remove(product_id)
        if removed is None:
            raise EntityNotFoundError("Product", product_id)
        logger.info("Deleted product %d", product_id)
        return removed


def _check_non_negative(**values: float | int | None) -> None:
    for name, value in values.items():
        if value is not None and value < 0:
            raise EntityValidationError("Product", f"{name[:1].upper()}{name[1:]} must be non-negative")

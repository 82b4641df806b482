"""Unit tests for the InMemoryRecordStore."""

import dataclasses

import pytest

from storefront.domain.entities import Product, User
from storefront.infrastructure.store import (
    InMemoryRecordStore,
    UpdateMode,
    seed_products,
    seed_users,
)


@pytest.fixture
def products() -> InMemoryRecordStore[Product]:
    return InMemoryRecordStore("Product", seed=seed_products())


@pytest.fixture
def users() -> InMemoryRecordStore[User]:
    return InMemoryRecordStore("User", seed=seed_users())


@pytest.mark.asyncio
async def test_insert_assigns_next_id_after_seed(products):
    created = await products.insert(Product(name="Mug", price=9.99, category="Home"))
    assert created.id == 5


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(products):
    first = await products.insert(Product(name="Mug", price=9.99, category="Home"))
    await products.remove(2)
    second = await products.insert(Product(name="Lamp", price=19.0, category="Home"))

    assert first.id == 5
    assert second.id == 6
    ids = [p.id for p in await products.list()]
    assert len(ids) == len(set(ids))
    assert second.id > max(i for i in ids if i != second.id)


@pytest.mark.asyncio
async def test_empty_store_starts_at_one():
    store: InMemoryRecordStore[Product] = InMemoryRecordStore("Product")
    created = await store.insert(Product(name="A", price=1.0, category="X"))
    assert created.id == 1


@pytest.mark.asyncio
async def test_get_after_insert_returns_equal_record(products):
    created = await products.insert(Product(name="Mug", price=9.99, category="Home"))
    fetched = await products.get(created.id)
    assert fetched == created


@pytest.mark.asyncio
async def test_get_unknown_id_returns_none(products):
    assert await products.get(999) is None


@pytest.mark.asyncio
async def test_list_filter_is_case_insensitive(products):
    electronics = await products.list({"category": "electronics"})
    assert [p.id for p in electronics] == [1, 2]


@pytest.mark.asyncio
async def test_list_ignores_none_filters_and_keeps_insertion_order(products):
    everything = await products.list({"category": None})
    assert [p.id for p in everything] == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_list_limit_truncates_but_count_does_not(products):
    page = await products.list({"category": "Electronics"}, limit=1)
    assert [p.id for p in page] == [1]
    assert await products.count({"category": "Electronics"}) == 2


@pytest.mark.asyncio
async def test_non_positive_limit_means_no_limit(products):
    assert len(await products.list(limit=0)) == 4
    assert len(await products.list(limit=-3)) == 4


@pytest.mark.asyncio
async def test_boolean_filter(users):
    inactive = await users.list({"is_active": False})
    assert [u.username for u in inactive] == ["bob_wilson"]


@pytest.mark.asyncio
async def test_replace_changes_only_given_field(products):
    before = dataclasses.asdict(await products.get(1))
    updated = await products.replace(1, {"name": "Studio Headphones"})

    after = dataclasses.asdict(updated)
    assert after["name"] == "Studio Headphones"
    before.pop("name")
    after.pop("name")
    assert after == before


@pytest.mark.asyncio
async def test_truthy_mode_skips_falsy_values(products):
    assert products.update_mode is UpdateMode.TRUTHY
    updated = await products.replace(1, {"stock": 0, "description": "", "price": 0.0})
    assert updated.stock == 50
    assert updated.price == 99.99
    assert updated.description.startswith("High-quality")


@pytest.mark.asyncio
async def test_present_mode_applies_falsy_values():
    store = InMemoryRecordStore("Product", seed=seed_products(), update_mode="present")
    updated = await store.replace(1, {"stock": 0, "description": "", "name": None})
    assert updated.stock == 0
    assert updated.description == ""
    assert updated.name == "Wireless Bluetooth Headphones"


@pytest.mark.asyncio
async def test_replace_never_touches_id_or_unknown_fields(products):
    updated = await products.replace(1, {"id": 42, "colour": "red"})
    assert updated.id == 1
    assert not hasattr(updated, "colour")


@pytest.mark.asyncio
async def test_replace_unknown_id_returns_none(products):
    assert await products.replace(999, {"name": "X"}) is None


@pytest.mark.asyncio
async def test_remove_then_get_is_none(products):
    removed = await products.remove(3)
    assert removed.name == "Running Shoes"
    assert await products.get(3) is None
    assert await products.remove(3) is None


def test_applies_follows_update_mode():
    truthy = InMemoryRecordStore("Product")
    present = InMemoryRecordStore("Product", update_mode=UpdateMode.PRESENT)

    assert [truthy.applies(v) for v in (None, 0, "", False, 3)] == [False, False, False, False, True]
    assert [present.applies(v) for v in (None, 0, "", False, 3)] == [False, True, True, True, True]

"""In-memory record store package."""

from .in_memory_store import InMemoryRecordStore, UpdateMode
from .seed import seed_products, seed_users

__all__ = ["InMemoryRecordStore", "UpdateMode", "seed_products", "seed_users"]

"""Abstract repository interface (port) for in-memory record collections."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

RecordT = TypeVar("RecordT")


class RecordStore(ABC, Generic[RecordT]):
    """Port for one entity type's records — implemented in the infrastructure layer.

    Records are kept in insertion order and identified by a positive integer
    ``id`` that the store assigns and never reuses.
    """

    @abstractmethod
    async def list(
        self,
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[RecordT]:
        """Return records matching every filter, in insertion order.

        String values compare case-insensitively, ``None`` filter values are
        ignored, and a positive ``limit`` truncates the result.
        """
        ...

    @abstractmethod
    async def count(self, filters: dict[str, Any] | None = None) -> int:
        """Number of records matching ``filters`` before any limit."""
        ...

    @abstractmethod
    async def get(self, record_id: int) -> RecordT | None:
        """Retrieve a single record by id."""
        ...

    @abstractmethod
    async def insert(self, record: RecordT) -> RecordT:
        """Assign the next id, append the record and return it."""
        ...

    @abstractmethod
    async def replace(self, record_id: int, fields: dict[str, Any]) -> RecordT | None:
        """Overwrite the given fields in place. Returns None if not found."""
        ...

    @abstractmethod
    async def remove(self, record_id: int) -> RecordT | None:
        """Remove a record and return it. Returns None if not found."""
        ...

    def applies(self, value: Any) -> bool:
        """Whether ``replace`` would write ``value``; ``None`` never is."""
        return value is not None

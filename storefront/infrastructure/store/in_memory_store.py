"""In-memory implementation of the RecordStore port."""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any, Generic, TypeVar

from storefront.application.interfaces import RecordStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class UpdateMode(str, Enum):
    """How ``replace`` treats the values of a partial update.

    TRUTHY  — only truthy values are applied; ``0``, ``""`` and ``False``
              count as "not provided" (legacy behaviour).
    PRESENT — every non-null value present in the payload is applied.
    """

    TRUTHY = "truthy"
    PRESENT = "present"


class InMemoryRecordStore(RecordStore[RecordT], Generic[RecordT]):
    """Ordered list of dataclass records with a monotonic id counter.

    Every method runs to completion without awaiting, so concurrent requests
    on one event loop never observe a half-applied mutation.
    """

    def __init__(
        self,
        entity_type: str,
        seed: Iterable[RecordT] = (),
        update_mode: UpdateMode | str = UpdateMode.TRUTHY,
    ) -> None:
        self._entity_type = entity_type
        self._records: list[RecordT] = list(seed)
        self._update_mode = UpdateMode(update_mode)
        self._next_id = max((r.id for r in self._records), default=0) + 1

    @property
    def update_mode(self) -> UpdateMode:
        return self._update_mode

    async def list(
        self,
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[RecordT]:
        matches = [r for r in self._records if _matches(r, filters)]
        if limit is not None and limit > 0:
            return matches[:limit]
        return matches

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        return sum(1 for r in self._records if _matches(r, filters))

    async def get(self, record_id: int) -> RecordT | None:
        return next((r for r in self._records if r.id == record_id), None)

    async def insert(self, record: RecordT) -> RecordT:
        record.id = self._next_id
        self._next_id += 1
        self._records.append(record)
        logger.debug("%s %d inserted (%d records)", self._entity_type, record.id, len(self._records))
        return record

    async def replace(self, record_id: int, fields: dict[str, Any]) -> RecordT | None:
        record = await self.get(record_id)
        if record is None:
            return None

        for name, value in fields.items():
            if name == "id" or not hasattr(record, name):
                continue
            if self.applies(value):
                setattr(record, name, value)
        return record

    def applies(self, value: Any) -> bool:
        if value is None:
            return False
        return self._update_mode is UpdateMode.PRESENT or bool(value)

    async def remove(self, record_id: int) -> RecordT | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                logger.debug("%s %d removed", self._entity_type, record_id)
                return self._records.pop(index)
        return None


def _matches(record: Any, filters: dict[str, Any] | None) -> bool:
    if not filters:
        return True
    for name, expected in filters.items():
        if expected is None:
            continue
        actual = getattr(record, name, None)
        if isinstance(expected, str) and isinstance(actual, str):
            if actual.casefold() != expected.casefold():
                return False
        elif actual != expected:
            return False
    return True

"""
SubTracker Backend: Record Store Contract
============================================

Services only see this protocol, never the session or the ORM query API,
so a store can be swapped (SQL in production, in-memory in tests) without
touching service code.
"""

from typing import List, Protocol, TypeVar

from subtracker.database import Base

RecordT = TypeVar("RecordT", bound=Base)


class RecordStore(Protocol[RecordT]):
    """Contract for single-entity persistence."""

    async def save(self, record: RecordT) -> RecordT:
        """Persist a new record and return it with its assigned id."""
        ...

    async def find_all(self) -> List[RecordT]:
        """Return every stored record."""
        ...

    async def delete_by_id(self, record_id: int) -> bool:
        """Remove the record if present. Returns whether a record was removed."""
        ...

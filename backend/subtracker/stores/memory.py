"""
SubTracker Backend: In-Memory Record Store
=============================================

What:  Dict-backed RecordStore used by the unit tests.
How:   Ids come from a per-store counter starting at 1 and are never reused,
       matching autoincrement semantics. Iteration follows insertion order.
"""

import itertools
from typing import Dict, Generic, List

from subtracker.stores.base import RecordT


class InMemoryRecordStore(Generic[RecordT]):
    """Keeps records in process memory; state is lost with the instance."""

    def __init__(self) -> None:
        self._records: Dict[int, RecordT] = {}
        self._ids = itertools.count(1)

    async def save(self, record: RecordT) -> RecordT:
        record.id = next(self._ids)
        self._records[record.id] = record
        return record

    async def find_all(self) -> List[RecordT]:
        return list(self._records.values())

    async def delete_by_id(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)

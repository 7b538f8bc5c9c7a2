"""
SubTracker Backend: Record Stores
====================================

What:  Per-entity persistence behind a small contract: save, find_all,
       delete_by_id.
Who:   Services receive a store at construction; routes build a
       SqlRecordStore over the request-scoped session.

Store Inventory:
    - RecordStore (protocol): the contract services depend on
    - SqlRecordStore: async SQLAlchemy implementation over one ORM model
    - InMemoryRecordStore: dict-backed implementation for tests
"""

from subtracker.stores.base import RecordStore
from subtracker.stores.memory import InMemoryRecordStore
from subtracker.stores.sql import SqlRecordStore

__all__ = ["RecordStore", "InMemoryRecordStore", "SqlRecordStore"]

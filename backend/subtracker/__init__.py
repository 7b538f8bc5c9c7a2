"""
SubTracker Backend: Application Package
==========================================

Layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← list / create / delete, spending
    ├─────────────────────────────────────┤
    │        Record Stores (Persistence)  │  ← save / find_all / delete_by_id
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

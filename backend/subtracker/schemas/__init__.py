"""
SubTracker Backend: Pydantic Request/Response Schemas
========================================================

API contracts are separate from the ORM models: JSON uses camelCase field
names while the models use snake_case attributes.
"""

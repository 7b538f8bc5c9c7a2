"""
SubTracker Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions raised by services.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.

Exception Hierarchy:
    SubTrackerError (base)       → 500 Internal Server Error
    └── DatabaseError            → 500 Internal Server Error

Malformed request bodies never reach the services: FastAPI rejects them
with its default 422 response before the handler runs.
"""

from typing import Any, Dict, Optional


class SubTrackerError(Exception):
    """
    Base exception for all SubTracker application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(SubTrackerError):
    """
    Raised when a store operation fails.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The client always receives a generic message. The original error type
    is kept in `context` for the server-side log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

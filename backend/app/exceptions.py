"""
DreamHome API — Custom Exception Hierarchy
============================================

What:  Defines application-specific exceptions for the two failure modes the
       API distinguishes: a missing row and a failed database statement.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    DreamHomeError (base)
    ├── NotFoundError   → 404 Not Found
    └── DatabaseError   → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class DreamHomeError(Exception):
    """
    Base exception for all DreamHome application errors.

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


class NotFoundError(DreamHomeError):
    """
    Raised when a requested row does not exist.

    When:    GET /properties/{propertyNo} with an unknown property number.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing rows; the service layer converts
    that into this exception so the route stays free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(DreamHomeError):
    """
    Raised when a database statement fails.

    When:    Connection lost, duplicate primary key, NULL in a NOT NULL column,
             foreign key violation, and so on.
    HTTP:    500 Internal Server Error

    The message returned to the client is always the generic "Database error".
    The driver error, table, and key are kept in `context` and logged
    server-side only.
    """

    def __init__(
        self,
        message: str = "Database error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

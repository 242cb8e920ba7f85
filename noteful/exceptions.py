"""
Noteful API: Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the three failure classes a
       request can hit: bad input, missing row, broken store.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers (registered in main.py) turn them into
       `{"error": {"message": ...}}` responses with the right status code.
Who:   Raised by the validation utilities and ResourceService.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── StoreFault        → 500 Internal Server Error (message never shown)
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

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
        self.context = dict(context or {})
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when client input fails validation.

    When:    Missing required field on create, no updatable field on patch,
             a note referencing a folder that does not exist.
    HTTP:    400 Bad Request

    Example response:
        {"error": {"message": "Missing 'name' in request body"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotefulError):
    """
    Raised when an item-scoped route names an id with no matching row.

    The message depends only on the resource kind, so GET, PATCH and
    DELETE all answer the same way: "Folder doesn't exist".
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} doesn't exist", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StoreFault(NotefulError):
    """
    Raised when a database operation fails unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. SQL text and
    driver errors are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

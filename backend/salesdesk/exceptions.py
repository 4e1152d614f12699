"""
SalesDesk API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the failure paths of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error bodies with the matching HTTP status code.
Who:   Raised by services and the database layer; caught by global handlers.

Exception Hierarchy:
    SalesDeskError (base)
    ├── ValidationError   → 400 {"errors": [...]}
    ├── BadRequestError   → 400 {"error": "..."}
    ├── NotFoundError     → 404 {"error": "Not found"}
    ├── ConflictError     → 409 {"error": "CUST_CODE already exists"}
    └── DatabaseError     → 500 {"error": "Internal Server Error"}

Validation and existence checks run in the services before any write, so the
common failures carry precise messages. Everything else ends up as a generic
500 and the detail stays in the server log.
"""

from typing import Any, Dict, List, Optional


class SalesDeskError(Exception):
    """
    Base exception for all SalesDesk application errors.

    Attributes:
        message:  Client-facing description (safe to return in a response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SalesDeskError):
    """
    Raised when a customer payload fails field validation.

    HTTP:    400 Bad Request
    Body:    {"errors": ["CUST_CODE is required", "OPENING_AMT must be ..."]}

    The full list of violations is kept in order so a client can fix every
    field in one round trip.
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = list(errors)
        super().__init__(message="; ".join(self.errors) or "Validation failed", context=context)


class BadRequestError(SalesDeskError):
    """
    Raised for malformed requests that are not field violations.

    When:    Body is not a JSON object, or a PATCH carries no recognized field.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Bad request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(SalesDeskError):
    """
    Raised when no row exists for the requested key.

    HTTP:    404 Not Found

    The client-facing message is always "Not found"; the resource and key
    are kept in context for the log line.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(SalesDeskError):
    """
    Raised when creating a customer whose code already exists.

    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "CUST_CODE already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(SalesDeskError):
    """
    Raised when a statement cannot be executed.

    When:    Pool checkout timed out, connection lost, driver error,
             constraint violation that was not pre-checked.
    HTTP:    500 Internal Server Error

    Security Note:
        The response body is always the generic message. Driver messages
        can reveal table or constraint names and are only logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

"""
SalesDesk API — Shared Response Schemas
========================================

What:  Error bodies and the health payload, shared by every router.
How:   Referenced from route `responses=` so they appear as components in
       the OpenAPI document.
"""

from typing import List

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Body of every non-validation error (404, 409, 400 bad request, 500).

    Example:
        {"error": "Not found"}
    """
    error: str = Field(description="Human-readable error message", examples=["Not found"])


class ValidationErrorResponse(BaseModel):
    """
    Body of a 400 caused by field validation; one message per violation.
    """
    errors: List[str] = Field(
        description="Violation messages in field order",
        examples=[["CUST_CODE is required", "OPENING_AMT must be a non-negative number"]],
    )


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

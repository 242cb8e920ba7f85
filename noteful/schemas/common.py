"""
Noteful API: Shared Response Schemas
======================================

What:  Error and health payloads used by every router.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {"error": {"message": "Folder doesn't exist"}}

    The request correlation ID travels in the X-Request-ID header rather
    than in the body.
    """
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

"""
DreamHome API — Shared Response Schemas
=========================================

What:  Response models used across resources: plain messages, errors and
       the health check.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Returned by DELETE routes."""
    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """
    Error body for 404 and 500 responses.

    Example:
        {"error": "Database error", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Error description, e.g. 'Database error'")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

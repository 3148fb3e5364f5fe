"""Pydantic models for API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Detail of a failed resolve request."""

    error: str
    message: str
    upstream_status: Optional[int] = None
    upstream_body: Any = None


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    endpoint: str
    timeout: float
    auto_padding: bool

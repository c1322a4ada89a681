"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across all API endpoints.

==============================================================================
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Outcome of a write operation."""
    status: str


class ErrorResponse(BaseModel):
    """Error envelope produced by the exception handlers."""
    error: str
    code: str
    details: Optional[Dict[str, Any]] = Field(default=None)


class HealthResponse(BaseModel):
    """Service health summary."""
    status: str = Field(default="healthy")
    items: int = Field(ge=0)


class NotFoundResponse(BaseModel):
    """Lookup of a well-formed code that is not in the catalog."""
    error: str = Field(default="code not found")
    code: str = Field(default="CODE_NOT_FOUND")
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def for_code(cls, produce_code: str) -> "NotFoundResponse":
        """Create the not-found payload for a produce code."""
        return cls(details={"code": produce_code})

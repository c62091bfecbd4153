"""Response envelopes shared by every endpoint.

Success:
    {"success": true, "message": "...", "data": {...}}

Failure:
    {"success": false, "error": {"code": "...", "message": "...", "details": {...}}}
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """Envelope for successful responses."""

    success: bool = Field(default=True, description="Always true on success")
    message: str | None = Field(default=None, description="Human-readable outcome")
    data: DataT | None = Field(default=None, description="Endpoint payload")


class ErrorBody(BaseModel):
    """Error payload inside the failure envelope.

    Attributes:
        code: Machine-readable error code (e.g., "validation_error").
        message: Human-readable message, safe to show to end users.
        details: Optional extra context (e.g., {"field": "email"}).
    """

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Extra context")


class ErrorResponse(BaseModel):
    """Envelope for failed responses."""

    success: bool = Field(default=False, description="Always false on failure")
    error: ErrorBody

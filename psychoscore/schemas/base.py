"""Base Pydantic schemas for the PsychoScore API.

This module provides the response envelope shared by all endpoints, the
error payload and the health check schema.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from psychoscore.utils.exceptions import PsychoScoreError

# Generic type variable for data
DataType = TypeVar('DataType')


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = {
        "use_enum_values": True,
        "validate_assignment": True,
        "arbitrary_types_allowed": False,
        "str_strip_whitespace": True,
    }


class ResponseMetadata(BaseSchema):
    """Metadata included in API responses."""

    request_id: Optional[str] = Field(None, description="Unique request identifier")
    timestamp: datetime = Field(default_factory=_utc_now, description="Response timestamp")
    version: str = Field(default="1.0", description="API version")
    processing_time_ms: Optional[float] = Field(None, description="Request processing time in milliseconds")


class BaseResponse(BaseSchema, Generic[DataType]):
    """Base response schema for all API endpoints."""

    success: bool = Field(..., description="Whether the request was successful")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[DataType] = Field(None, description="Response data")
    meta: Optional[ResponseMetadata] = Field(None, description="Response metadata")


class SuccessResponse(BaseResponse[DataType]):
    """Success response schema."""

    success: bool = Field(default=True, description="Always true for success responses")

    @classmethod
    def create(
        cls,
        data: DataType,
        message: Optional[str] = None,
        meta: Optional[ResponseMetadata] = None
    ) -> "SuccessResponse[DataType]":
        return cls(
            success=True,
            data=data,
            message=message,
            meta=meta or ResponseMetadata()
        )


class ErrorDetail(BaseSchema):
    """Individual error detail."""

    code: Optional[str] = Field(None, description="Error code")
    message: str = Field(..., description="Error message")
    field: Optional[str] = Field(None, description="Field that caused the error")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")


class ErrorResponse(BaseResponse[None]):
    """Error response schema."""

    success: bool = Field(default=False, description="Always false for error responses")
    error: ErrorDetail = Field(..., description="Error information")

    @classmethod
    def create(
        cls,
        message: str,
        code: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        meta: Optional[ResponseMetadata] = None
    ) -> "ErrorResponse":
        """Create an error response.

        Args:
            message: Error message
            code: Error code
            field: Field that caused the error
            details: Additional error details
            meta: Optional metadata

        Returns:
            ErrorResponse: Error response instance
        """
        return cls(
            success=False,
            error=ErrorDetail(
                code=code,
                message=message,
                field=field,
                details=details
            ),
            meta=meta or ResponseMetadata()
        )

    @classmethod
    def from_exception(
        cls,
        error: PsychoScoreError,
        meta: Optional[ResponseMetadata] = None
    ) -> "ErrorResponse":
        """Create an error response from an application exception."""
        return cls.create(
            message=error.message,
            code=error.error_code,
            field=error.details.get("field"),
            details=error.details or None,
            meta=meta
        )


class HealthCheckResponse(BaseSchema):
    """Health check response schema."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(default_factory=_utc_now, description="Check timestamp")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    uptime_seconds: float = Field(..., ge=0, description="Application uptime in seconds")
    supported_test_kinds: List[str] = Field(default_factory=list, description="Test kinds with a registered scorer")


def create_success_response(
    data: Any,
    message: Optional[str] = None,
    request_id: Optional[str] = None
) -> SuccessResponse:
    """Create a success response with metadata.

    Args:
        data: Response data
        message: Optional success message
        request_id: Optional request ID

    Returns:
        SuccessResponse: Success response
    """
    meta = ResponseMetadata()
    if request_id:
        meta.request_id = request_id

    return SuccessResponse.create(data=data, message=message, meta=meta)

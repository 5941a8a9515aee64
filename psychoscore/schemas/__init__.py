"""PsychoScore API schemas package."""

from psychoscore.schemas.analysis_schemas import AnalysisRequest
from psychoscore.schemas.base import (
    BaseResponse,
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthCheckResponse,
    ResponseMetadata,
    SuccessResponse,
    create_success_response,
)

__all__ = [
    "AnalysisRequest",
    "BaseResponse",
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthCheckResponse",
    "ResponseMetadata",
    "SuccessResponse",
    "create_success_response",
]

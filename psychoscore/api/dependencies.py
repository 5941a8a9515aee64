"""Common dependencies for FastAPI routes."""

from functools import lru_cache

from fastapi import Request

from psychoscore.services.analysis_service import AnalysisService


def get_request_id(request: Request) -> str:
    """Get request ID from request state.

    Args:
        request: FastAPI request object

    Returns:
        Request ID string
    """
    return getattr(request.state, "request_id", "unknown")


@lru_cache()
def get_analysis_service() -> AnalysisService:
    """Shared analysis service; it holds no per-request state."""
    return AnalysisService()

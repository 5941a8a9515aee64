"""Assessment analysis API endpoints for PsychoScore.

Both endpoints are stateless: the caller sends the test definition together
with the completed response set and gets the computed result back.
"""

from fastapi import APIRouter, Depends, status

from psychoscore.api.dependencies import get_analysis_service, get_request_id
from psychoscore.models.report import AssessmentReport
from psychoscore.schemas.analysis_schemas import AnalysisRequest
from psychoscore.schemas.base import SuccessResponse, create_success_response
from psychoscore.services.analysis_service import AnalysisService
from psychoscore.services.attempt_scoring_service import AttemptScore
from psychoscore.utils.logger import get_api_logger

router = APIRouter(
    responses={
        422: {"description": "Validation error"},
        500: {"description": "Internal server error"}
    }
)

logger = get_api_logger()


@router.post(
    "",
    response_model=SuccessResponse[AssessmentReport],
    status_code=status.HTTP_200_OK,
    summary="Analyze a completed assessment",
    description="Score a response set against its test definition and return the full report"
)
async def analyze_assessment(
    analysis_request: AnalysisRequest,
    request_id: str = Depends(get_request_id),
    service: AnalysisService = Depends(get_analysis_service)
) -> SuccessResponse[AssessmentReport]:
    """Analyze one completed assessment.

    Args:
        analysis_request: Test definition and response set
        request_id: Current request id
        service: Analysis service

    Returns:
        SuccessResponse[AssessmentReport]: The assessment report

    Raises:
        ValidationError: If the input fails structural validation
    """
    test = analysis_request.test_definition
    responses = analysis_request.response_set

    service.ensure_valid(test, responses)
    report = service.analyze(test, responses)

    logger.info(
        f"Report ready for test {test.id}",
        extra={"test_id": test.id, "reliability": report.reliability.value}
    )

    return create_success_response(
        data=report,
        message="Assessment analyzed successfully",
        request_id=request_id
    )


@router.post(
    "/attempt-score",
    response_model=SuccessResponse[AttemptScore],
    status_code=status.HTTP_200_OK,
    summary="Score an attempt",
    description="Compute points, percentage and per-category scores for a submitted attempt"
)
async def score_attempt(
    analysis_request: AnalysisRequest,
    request_id: str = Depends(get_request_id),
    service: AnalysisService = Depends(get_analysis_service)
) -> SuccessResponse[AttemptScore]:
    test = analysis_request.test_definition
    responses = analysis_request.response_set

    service.ensure_valid(test, responses)
    attempt = service.score_attempt(test, responses)

    return create_success_response(
        data=attempt,
        message="Attempt scored successfully",
        request_id=request_id
    )

"""Assessment analysis pipeline for PsychoScore.

This service runs a full scoring pass over a test definition and a completed
response set:

1. aggregate answers by category for the test kind,
2. run the one domain scorer registered for that kind,
3. audit reliability on the raw answers,
4. synthesize interpretations and recommendations into the final report.

The pass is pure: the same input always yields an identical report.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from psychoscore.models.assessment import ResponseSet, TestDefinition
from psychoscore.models.report import AssessmentReport
from psychoscore.schemas.analysis_schemas import AnalysisRequest
from psychoscore.services.aggregation_service import CategoryCatalog, ResponseAggregator
from psychoscore.services.attempt_scoring_service import AttemptScore, AttemptScorer
from psychoscore.services.interpretation_service import InterpretationSynthesizer
from psychoscore.services.reliability_service import ReliabilityAuditor
from psychoscore.services.scorers import ScorerRegistry, registry
from psychoscore.utils.constants import ErrorCodes
from psychoscore.utils.exceptions import ValidationError
from psychoscore.utils.helpers import clamp, round_half_up
from psychoscore.utils.logger import PerformanceLogger, get_engine_logger, get_logger, get_validation_logger
from psychoscore.utils.validators import ValidationResult, validate_assessment_input

logger = get_logger(__name__)

EMPTY_CATALOG = CategoryCatalog(())


class AnalysisService:
    """Runs the scoring pipeline and produces an AssessmentReport."""

    def __init__(
        self,
        scorers: Optional[ScorerRegistry] = None,
        aggregator: Optional[ResponseAggregator] = None,
        auditor: Optional[ReliabilityAuditor] = None,
        synthesizer: Optional[InterpretationSynthesizer] = None,
        attempt_scorer: Optional[AttemptScorer] = None,
    ):
        """Initialize analysis service.

        Args:
            scorers: Scorer registry (defaults to the built-in registry)
            aggregator: Response aggregator
            auditor: Reliability auditor
            synthesizer: Interpretation synthesizer
            attempt_scorer: Attempt scorer used for the overall score fallback
        """
        self.scorers = scorers or registry
        self.aggregator = aggregator or ResponseAggregator()
        self.auditor = auditor or ReliabilityAuditor()
        self.synthesizer = synthesizer or InterpretationSynthesizer()
        self.attempt_scorer = attempt_scorer or AttemptScorer()

    def analyze(self, test: TestDefinition, responses: ResponseSet) -> AssessmentReport:
        """Score a response set against its test definition.

        Never raises for sparse input: unsupported kinds yield no domain
        analysis and empty response sets are reported as Invalid.

        Args:
            test: Test definition
            responses: Completed response set

        Returns:
            AssessmentReport: The immutable report
        """
        kind = test.test_kind
        scorer = self.scorers.get(kind)
        if scorer is None:
            logger.warning(
                f"No scorer for test kind '{test.kind}', domain analysis omitted",
                extra={"test_id": test.id, "test_kind": test.kind}
            )

        with PerformanceLogger("assessment_analysis", get_engine_logger(), {"test_id": test.id}):
            attempt = self.attempt_scorer.score(test, responses)
            overall_score = self._overall_score(responses, attempt)
            completion_time = responses.completion_time

            catalog = scorer.catalog if scorer is not None else EMPTY_CATALOG
            aggregate = self.aggregator.aggregate(test, responses, catalog)
            domain = scorer.score(aggregate) if scorer is not None else None

            reliability = self.auditor.assess(responses.answers, completion_time)
            synthesis = self.synthesizer.synthesize(overall_score, reliability, domain)

            report = AssessmentReport(
                test_name=test.name,
                test_kind=kind.value if kind is not None else None,
                candidate=responses.candidate,
                overall_score=overall_score,
                reliability=reliability,
                completion_time=completion_time,
                domain_analysis=domain,
                category_scores=attempt.category_scores,
                unrecognized_categories=aggregate.unrecognized,
                interpretations=synthesis.interpretations,
                recommendations=synthesis.recommendations,
                strengths=synthesis.strengths,
                areas_for_improvement=synthesis.areas_for_improvement,
                risk_factors=synthesis.risk_factors,
                verification_score=self.auditor.verification_score(reliability, completion_time, overall_score),
            )

        logger.info(
            f"Analyzed {test.kind or 'unknown'} test {test.id}: "
            f"score={overall_score} reliability={reliability.value}",
            extra={
                "test_id": test.id,
                "overall_score": overall_score,
                "reliability": reliability.value,
                "verification_score": report.verification_score,
            }
        )
        return report

    def analyze_payload(self, payload: Dict[str, Any]) -> AssessmentReport:
        """Validate a raw request payload, then analyze it.

        Args:
            payload: Mapping with ``testDefinition`` and ``responseSet`` keys

        Returns:
            AssessmentReport: The report

        Raises:
            ValidationError: If the payload is malformed or structurally invalid
        """
        try:
            request = AnalysisRequest.model_validate(payload)
        except PydanticValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ValidationError(
                "Invalid analysis payload",
                validation_errors=errors,
                error_code=ErrorCodes.INVALID_INPUT,
                cause=e,
            ) from e

        self.ensure_valid(request.test_definition, request.response_set)
        return self.analyze(request.test_definition, request.response_set)

    def ensure_valid(self, test: TestDefinition, responses: ResponseSet) -> ValidationResult:
        """Run structural validation, logging warnings.

        Raises:
            ValidationError: If validation reports any error
        """
        result = validate_assessment_input(test, responses)

        validation_logger = get_validation_logger()
        for warning in result.warnings:
            validation_logger.warning(warning, extra={"test_id": test.id})

        if not result.is_valid:
            raise ValidationError(
                "Assessment input failed validation",
                validation_errors=result.errors,
                error_code=ErrorCodes.INVALID_INPUT,
            )
        return result

    def score_attempt(self, test: TestDefinition, responses: ResponseSet) -> AttemptScore:
        return self.attempt_scorer.score(test, responses)

    def _overall_score(self, responses: ResponseSet, attempt: AttemptScore) -> int:
        """Recorded percentage score when present, else the computed one."""
        if responses.percentage_score is None:
            return attempt.percentage_score
        return clamp(round_half_up(responses.percentage_score), 0, 100)


def analyze_assessment(test: TestDefinition, responses: ResponseSet) -> AssessmentReport:
    """Score a response set with the default pipeline."""
    return AnalysisService().analyze(test, responses)

"""Structural validation for PsychoScore inputs.

The scoring engine tolerates sparse input, so these checks only reject input
that cannot describe a real test or attempt (duplicate question ids, negative
durations). Softer problems are reported as warnings and scoring proceeds.
"""

from collections import Counter
from typing import List, Union

from pydantic import BaseModel, Field

from psychoscore.models.assessment import ResponseSet, TestDefinition
from psychoscore.utils.constants import QuestionType, TestKind


class ValidationResult(BaseModel):
    """Result of a validation operation."""

    is_valid: bool = Field(..., description="Whether validation passed")
    errors: List[str] = Field(default_factory=list, description="List of validation errors")
    warnings: List[str] = Field(default_factory=list, description="List of validation warnings")

    def add_error(self, error: str) -> None:
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Fold another result's errors and warnings into this one."""
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)
        return self

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> "ValidationResult":
        if isinstance(errors, str):
            errors = [errors]
        return cls(is_valid=False, errors=errors)


def validate_test_definition(test: TestDefinition) -> ValidationResult:
    """Validate a test definition.

    Args:
        test: Test definition to validate

    Returns:
        ValidationResult: Errors for duplicate ids or a missing kind, warnings
        for softer inconsistencies
    """
    result = ValidationResult.success()

    if not test.kind.strip():
        result.add_error("Test kind is required")
    elif test.test_kind is None:
        result.add_warning(f"Unsupported test kind '{test.kind}' - no domain analysis will be produced")

    duplicates = [key for key, count in Counter(q.key for q in test.questions).items() if count > 1]
    if duplicates:
        result.add_error(f"Duplicate question ids: {', '.join(duplicates)}")

    if test.total_questions is not None and test.total_questions != len(test.questions):
        result.add_warning(
            f"Test declares {test.total_questions} questions but defines {len(test.questions)}"
        )

    uncategorized = [q.key for q in test.questions if not q.category]
    if uncategorized:
        result.add_warning(f"Questions without a category: {', '.join(uncategorized)}")

    if test.test_kind is TestKind.COGNITIVE:
        ungraded = [
            q.key for q in test.questions
            if q.resolved_type is QuestionType.MULTIPLE_CHOICE and not q.is_graded
        ]
        if ungraded:
            result.add_warning(f"Multiple-choice questions without a correct answer: {', '.join(ungraded)}")

    return result


def validate_response_set(responses: ResponseSet) -> ValidationResult:
    """Validate a response set.

    Args:
        responses: Response set to validate

    Returns:
        ValidationResult: Errors for impossible timing, warnings for repeated answers
    """
    result = ValidationResult.success()

    if responses.time_spent_seconds is not None and responses.time_spent_seconds < 0:
        result.add_error("Time spent cannot be negative")

    if (
        responses.started_at is not None
        and responses.submitted_at is not None
        and responses.submitted_at < responses.started_at
    ):
        result.add_error("Submission time is earlier than start time")

    if responses.percentage_score is not None and not 0 <= responses.percentage_score <= 100:
        result.add_warning("Percentage score is outside 0-100 and will be clamped")

    repeated = [key for key, count in Counter(a.question_key for a in responses.answers).items() if count > 1]
    if repeated:
        result.add_warning(f"Questions answered more than once: {', '.join(repeated)}")

    return result


def validate_assessment_input(test: TestDefinition, responses: ResponseSet) -> ValidationResult:
    """Validate a test definition and response set together.

    Args:
        test: Test definition
        responses: Response set for the test

    Returns:
        ValidationResult: Combined result, with a warning per answer whose
        question is not part of the test
    """
    result = validate_test_definition(test).merge(validate_response_set(responses))

    known = {question.key for question in test.questions}
    unknown = [answer.question_key for answer in responses.answers if answer.question_key not in known]
    if unknown:
        result.add_warning(f"Answers reference unknown questions: {', '.join(unknown)}")

    return result

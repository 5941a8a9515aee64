"""Attempt-level scoring for PsychoScore.

Computes the percentage score of a submitted attempt from per-question points,
plus a percentage per question category. The analysis pipeline uses it when
the response set does not already carry a percentage score.
"""

from collections import OrderedDict
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from psychoscore.models.assessment import Answer, Question, ResponseSet, TestDefinition
from psychoscore.utils.constants import QuestionType, RecommendationConstants, ScoringConstants, TestKind
from psychoscore.utils.helpers import answer_key, clamp, parse_int, percent_of
from psychoscore.utils.logger import get_logger

logger = get_logger(__name__)


class AttemptScore(BaseModel):
    """Points and percentages for one attempt."""

    total_score: int = 0
    max_possible_score: int = 0
    percentage_score: int = Field(default=0, ge=0, le=100)
    category_scores: Dict[str, int] = Field(default_factory=dict)
    recommendations: List[str] = Field(default_factory=list)


class AttemptScorer:
    """Scores answers by question shape and converts points to percentages."""

    def recommendations(self, kind: Optional[TestKind], percentage: int) -> List[str]:
        """Short attempt-level recommendations; only personality and cognitive have any."""
        for minimum, lines in RecommendationConstants.ATTEMPT_TIERS.get(kind, []):
            if percentage >= minimum:
                return list(lines)
        return []

    def question_points(self, question: Question, answer: Optional[Answer]) -> int:
        """Points earned on one question (0-5 for well-formed answers).

        Args:
            question: The question
            answer: The candidate's answer, or None when unanswered

        Returns:
            int: Points for the answer
        """
        if answer is None:
            return 0

        question_type = question.resolved_type
        if question_type is QuestionType.SCALE:
            return parse_int(answer.answer)
        if question_type is QuestionType.YES_NO:
            is_yes = answer_key(answer.answer).strip().lower() == "yes"
            return ScoringConstants.YES_POINTS if is_yes else ScoringConstants.NO_POINTS
        if question_type is QuestionType.MULTIPLE_CHOICE and question.is_graded:
            if answer_key(answer.answer) == answer_key(question.correct_answer):
                return ScoringConstants.CORRECT_POINTS
            return ScoringConstants.INCORRECT_POINTS
        return 0

    def score(self, test: TestDefinition, responses: ResponseSet) -> AttemptScore:
        """Score an attempt.

        Answers are scored in submission order; answers to unknown questions
        are skipped. The maximum is five points per question in the test,
        answered or not, while each category percentage covers only the
        answers it received.

        Args:
            test: Test definition
            responses: Submitted response set

        Returns:
            AttemptScore: Total points, percentage and per-category percentages
        """
        questions = test.question_index()
        total = 0
        category_points: "OrderedDict[str, int]" = OrderedDict()
        category_counts: Dict[str, int] = {}

        for answer in responses.answers:
            question = questions.get(answer.question_key)
            if question is None:
                continue

            points = self.question_points(question, answer)
            total += points

            if question.category:
                category_points[question.category] = category_points.get(question.category, 0) + points
                category_counts[question.category] = category_counts.get(question.category, 0) + 1

        max_possible = len(test.questions) * ScoringConstants.MAX_POINTS_PER_QUESTION
        percentage = clamp(
            percent_of(total, max_possible),
            ScoringConstants.MIN_PERCENTAGE,
            ScoringConstants.MAX_PERCENTAGE,
        )

        category_scores = {
            category: clamp(
                percent_of(points, category_counts[category] * ScoringConstants.MAX_POINTS_PER_QUESTION),
                ScoringConstants.MIN_PERCENTAGE,
                ScoringConstants.MAX_PERCENTAGE,
            )
            for category, points in category_points.items()
        }

        logger.debug(
            f"Attempt scored {total}/{max_possible} ({percentage}%)",
            extra={"test_id": test.id, "total_score": total, "percentage_score": percentage}
        )

        return AttemptScore(
            total_score=total,
            max_possible_score=max_possible,
            percentage_score=percentage,
            category_scores=category_scores,
            recommendations=self.recommendations(test.test_kind, percentage),
        )

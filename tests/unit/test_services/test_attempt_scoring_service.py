"""Unit tests for AttemptScorer."""

import pytest

from psychoscore.models.assessment import Answer, Question
from psychoscore.services.attempt_scoring_service import AttemptScorer
from psychoscore.utils.constants import TestKind


class TestQuestionPoints:
    """Test suite for AttemptScorer.question_points."""

    @pytest.fixture
    def scorer(self):
        return AttemptScorer()

    @pytest.mark.parametrize("question_type,answer,points", [
        ("scale", "4", 4),
        ("scale", "3.9", 3),
        ("likert", "5", 0),
        ("scale", "n/a", 0),
        ("yes_no", "Yes", 5),
        ("yes_no", "yes", 5),
        ("yes_no", "No", 1),
        ("yes_no", "maybe", 1),
        ("essay", "5", 0),
    ])
    def test_points_by_question_type(self, scorer, question_type, answer, points):
        question = Question(id=1, question_type=question_type)
        assert scorer.question_points(question, Answer(question_id=1, answer=answer)) == points

    def test_graded_multiple_choice(self, scorer):
        question = Question(id=1, question_type="multiple_choice", correct_answer="B")

        assert scorer.question_points(question, Answer(question_id=1, answer="B")) == 5
        assert scorer.question_points(question, Answer(question_id=1, answer="b")) == 0

    def test_ungraded_multiple_choice_scores_nothing(self, scorer):
        question = Question(id=1, question_type="multiple_choice")
        assert scorer.question_points(question, Answer(question_id=1, answer="B")) == 0

    def test_unanswered_question_scores_nothing(self, scorer):
        assert scorer.question_points(Question(id=1), None) == 0


class TestAttemptScorer:
    """Test suite for AttemptScorer.score."""

    @pytest.fixture
    def scorer(self):
        return AttemptScorer()

    def test_personality_attempt(self, scorer, warmth_test, warmth_responses):
        attempt = scorer.score(warmth_test, warmth_responses)

        assert attempt.total_score == 9
        assert attempt.max_possible_score == 10
        assert attempt.percentage_score == 90
        assert attempt.category_scores == {"Warmth (A)": 90}
        assert attempt.recommendations[0].startswith("Excellent personality fit")

    def test_unanswered_questions_count_toward_maximum(self, scorer, make_test, make_responses):
        test = make_test("communication", [(1, "verbal"), (2, "verbal"), (3, "written"), (4, "written")])

        attempt = scorer.score(test, make_responses([(1, "5"), (3, "3")]))

        assert attempt.max_possible_score == 20
        assert attempt.percentage_score == 40
        assert attempt.category_scores == {"verbal": 100, "written": 60}
        assert attempt.recommendations == []

    def test_unknown_questions_are_skipped(self, scorer, warmth_test, make_responses):
        attempt = scorer.score(warmth_test, make_responses([(1, "5"), (77, "5")]))

        assert attempt.total_score == 5

    def test_percentages_are_clamped(self, scorer, make_test, make_responses):
        attempt = scorer.score(make_test("personality", [(1, "warmth")]), make_responses([(1, "9")]))

        assert attempt.total_score == 9
        assert attempt.percentage_score == 100
        assert attempt.category_scores == {"warmth": 100}

    def test_likert_answers_earn_no_points(self, scorer, make_test, make_responses):
        test = make_test("culture", [{"id": 1, "category": "teamwork", "question_type": "likert"}])

        attempt = scorer.score(test, make_responses([(1, "5")]))

        assert attempt.total_score == 0
        assert attempt.percentage_score == 0
        assert attempt.category_scores == {"teamwork": 0}

    def test_empty_test(self, scorer, make_test, make_responses):
        attempt = scorer.score(make_test("cognitive", []), make_responses([]))

        assert attempt.max_possible_score == 0
        assert attempt.percentage_score == 0
        assert attempt.recommendations[0] == "May benefit from additional training in analytical thinking."

    @pytest.mark.parametrize("kind,percentage,first_line", [
        (TestKind.COGNITIVE, 80, "Strong cognitive abilities suitable for complex problem-solving roles."),
        (TestKind.COGNITIVE, 60, "Good cognitive performance with room for improvement."),
        (TestKind.PERSONALITY, 59, "Consider additional personality development training."),
    ])
    def test_recommendation_tiers(self, scorer, kind, percentage, first_line):
        assert scorer.recommendations(kind, percentage)[0] == first_line

    def test_no_recommendations_for_other_kinds(self, scorer):
        assert scorer.recommendations(TestKind.CULTURE, 95) == []
        assert scorer.recommendations(None, 95) == []

"""Shared fixtures for PsychoScore tests."""

import os

os.environ.setdefault("APP_ENV", "test")

from typing import Any, Dict, List, Optional  # noqa: E402

import pytest  # noqa: E402

from psychoscore.models.assessment import ResponseSet, TestDefinition  # noqa: E402


@pytest.fixture
def make_test():
    """Build a TestDefinition from (id, category) pairs or question dicts."""

    def _make(
        kind: str = "personality",
        questions: Optional[List[Any]] = None,
        **fields: Any
    ) -> TestDefinition:
        built: List[Dict[str, Any]] = []
        for item in questions or []:
            if isinstance(item, dict):
                built.append(item)
            else:
                question_id, category = item
                built.append({"id": question_id, "category": category})
        return TestDefinition(kind=kind, questions=built, **fields)

    return _make


@pytest.fixture
def make_responses():
    """Build a ResponseSet from (question id, answer) pairs."""

    def _make(
        answers: Optional[List[Any]] = None,
        time_spent_seconds: Optional[int] = 900,
        **fields: Any
    ) -> ResponseSet:
        built = [
            item if isinstance(item, dict) else {"question_id": item[0], "answer": item[1]}
            for item in answers or []
        ]
        return ResponseSet(
            candidate={"name": "Jordan Lee", "email": "jordan.lee@example.com"},
            answers=built,
            time_spent_seconds=time_spent_seconds,
            **fields
        )

    return _make


@pytest.fixture
def warmth_test(make_test):
    """Personality test with two Warmth questions."""
    return make_test(
        "personality",
        [(1, "Warmth (A)"), (2, "Warmth (A)")],
        id="pf-1",
        name="Workplace Personality Inventory",
    )


@pytest.fixture
def warmth_responses(make_responses):
    return make_responses([(1, "4"), (2, "5")])


@pytest.fixture
def numerical_test(make_test):
    """Cognitive test with ten graded numerical questions."""
    return make_test(
        "cognitive",
        [
            {
                "id": question_id,
                "category": "numerical",
                "questionType": "multiple_choice",
                "correctAnswer": "B",
            }
            for question_id in range(1, 11)
        ],
        id="cog-1",
        name="Numerical Reasoning",
    )


@pytest.fixture
def numerical_responses(make_responses):
    """Eight correct answers followed by two wrong ones."""
    return make_responses(
        [(question_id, "B") for question_id in range(1, 9)] + [(9, "C"), (10, "C")]
    )

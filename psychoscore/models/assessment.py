"""Assessment input models for PsychoScore.

This module defines the test definition and the completed response set that
together form the only input of a scoring run.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from psychoscore.models.base import EngineModel
from psychoscore.utils.constants import QuestionType, TestKind
from psychoscore.utils.helpers import answer_key

QuestionId = Union[int, str]
RawAnswer = Union[str, int, float, None]


class Question(EngineModel):
    """A single question of a test definition."""

    id: QuestionId
    text: str = Field(default="")
    question_type: str = Field(default=QuestionType.SCALE.value)
    category: Optional[str] = Field(default=None)
    correct_answer: Optional[Union[str, int, float]] = Field(default=None)
    order: int = Field(default=0)
    options: Optional[List[Any]] = Field(default=None)

    @property
    def key(self) -> str:
        return answer_key(self.id)

    @property
    def resolved_type(self) -> Optional[QuestionType]:
        return QuestionType.resolve(self.question_type)

    @property
    def is_graded(self) -> bool:
        """Whether the question has an answer key to grade against."""
        return self.correct_answer is not None and answer_key(self.correct_answer) != ""


class TestDefinition(EngineModel):
    """The test being scored: its kind and its ordered questions."""

    __test__ = False

    id: Optional[QuestionId] = Field(default=None)
    name: str = Field(default="Unknown Test")
    kind: str = Field(
        default="",
        validation_alias=AliasChoices("kind", "type", "testType", "test_type"),
    )
    time_limit_minutes: Optional[int] = Field(default=None, ge=0)
    total_questions: Optional[int] = Field(default=None, ge=0)
    questions: List[Question] = Field(default_factory=list)

    @property
    def test_kind(self) -> Optional[TestKind]:
        return TestKind.resolve(self.kind)

    def question_index(self) -> Dict[str, Question]:
        """Map each question id (as a string) to its question.

        Returns:
            Dict[str, Question]: Questions keyed by id; the first question wins
            when ids repeat
        """
        index: Dict[str, Question] = {}
        for question in self.questions:
            index.setdefault(question.key, question)
        return index


class Answer(EngineModel):
    """A candidate's raw answer to one question."""

    question_id: QuestionId
    answer: RawAnswer = Field(default=None)
    category: Optional[str] = Field(default=None)

    @property
    def question_key(self) -> str:
        return answer_key(self.question_id)


class CandidateInfo(EngineModel):
    name: str = Field(default="Unknown")
    email: str = Field(default="Unknown")

    @field_validator("name", "email", mode="before")
    @classmethod
    def default_blank(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "Unknown"
        return v


class ResponseSet(EngineModel):
    """A completed attempt: the candidate, the answers and timing metadata."""

    candidate: CandidateInfo = Field(default_factory=CandidateInfo)
    answers: List[Answer] = Field(default_factory=list)
    started_at: Optional[datetime] = Field(default=None)
    submitted_at: Optional[datetime] = Field(default=None)
    time_spent_seconds: Optional[int] = Field(default=None)
    percentage_score: Optional[float] = Field(default=None)

    @property
    def completion_time(self) -> int:
        """Completion time in whole seconds.

        Uses the recorded time spent, falling back to the gap between start and
        submission, and finally to 0.
        """
        if self.time_spent_seconds is not None:
            return self.time_spent_seconds
        if self.started_at is not None and self.submitted_at is not None:
            return int((self.submitted_at - self.started_at).total_seconds())
        return 0

"""Request schemas for analysis endpoints."""

from pydantic import Field

from psychoscore.models.assessment import ResponseSet, TestDefinition
from psychoscore.models.base import EngineModel


class AnalysisRequest(EngineModel):
    """A test definition together with one completed response set."""

    test_definition: TestDefinition = Field(..., description="Test being scored")
    response_set: ResponseSet = Field(..., description="Completed attempt to score")

    model_config = {
        **EngineModel.model_config,
        "json_schema_extra": {
            "example": {
                "testDefinition": {
                    "id": 1,
                    "name": "Workplace Personality Inventory",
                    "kind": "personality",
                    "questions": [
                        {"id": 1, "questionType": "scale", "category": "warmth"},
                        {"id": 2, "questionType": "scale", "category": "warmth"},
                    ],
                },
                "responseSet": {
                    "candidate": {"name": "Jordan Lee", "email": "jordan.lee@example.com"},
                    "answers": [
                        {"questionId": 1, "answer": "4"},
                        {"questionId": 2, "answer": "5"},
                    ],
                    "timeSpentSeconds": 900,
                },
            }
        },
    }

"""PsychoScore utilities package.

Constants, exceptions, numeric helpers and logging shared across the engine.
Validators live in ``psychoscore.utils.validators`` and are imported from there.
"""

from psychoscore.utils.constants import (
    ErrorCodes,
    FactorLevel,
    GlobalLevel,
    LeadershipPotential,
    PersonalityType,
    QuestionType,
    ReliabilityVerdict,
    TestKind,
    normalize_label,
)
from psychoscore.utils.exceptions import (
    ConfigurationError,
    PsychoScoreError,
    ScoringError,
    ValidationError,
)
from psychoscore.utils.helpers import answer_key, clamp, mean, parse_int, percent_of, round_half_up
from psychoscore.utils.logger import get_logger, setup_logging

__all__ = [
    "ErrorCodes",
    "FactorLevel",
    "GlobalLevel",
    "LeadershipPotential",
    "PersonalityType",
    "QuestionType",
    "ReliabilityVerdict",
    "TestKind",
    "normalize_label",
    "ConfigurationError",
    "PsychoScoreError",
    "ScoringError",
    "ValidationError",
    "answer_key",
    "clamp",
    "mean",
    "parse_int",
    "percent_of",
    "round_half_up",
    "get_logger",
    "setup_logging",
]

"""Domain scorers for PsychoScore.

Importing this package registers every built-in scorer with the registry.
"""

from psychoscore.services.scorers.base import DomainScorer, ScorerRegistry, registry
from psychoscore.services.scorers.cognitive import CognitiveScorer
from psychoscore.services.scorers.communication import CommunicationScorer
from psychoscore.services.scorers.culture import CultureScorer
from psychoscore.services.scorers.personality import (
    GlobalFactorSynthesizer,
    PersonalityFactorScorer,
    PersonalityScorer,
    TypologyClassifier,
)
from psychoscore.services.scorers.technical import TechnicalScorer

__all__ = [
    "DomainScorer",
    "ScorerRegistry",
    "registry",
    "PersonalityScorer",
    "PersonalityFactorScorer",
    "GlobalFactorSynthesizer",
    "TypologyClassifier",
    "CognitiveScorer",
    "CommunicationScorer",
    "TechnicalScorer",
    "CultureScorer",
]

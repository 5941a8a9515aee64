"""Personality scoring for PsychoScore.

This module scores the sixteen primary factors, derives the five composite
factors from them, and classifies the resulting profile into an archetype,
work-style tags and a leadership read-out.
"""

from typing import Dict, List, Mapping

from psychoscore.models.report import FactorScore, GlobalFactor, PersonalityFactors
from psychoscore.services.aggregation_service import CategoryAggregate, CategoryCatalog
from psychoscore.services.scorers.base import DomainScorer, registry
from psychoscore.utils.constants import (
    DEFAULT_WORK_STYLE,
    FACTOR_IMPLICATIONS,
    GLOBAL_FACTOR_FORMULAS,
    LEADERSHIP_FACTORS,
    PERSONALITY_TYPE_RULES,
    WORK_STYLE_TAGS,
    FactorLevel,
    GlobalLevel,
    LeadershipPotential,
    PersonalityType,
    PrimaryFactor,
    ScoringConstants,
    TestKind,
)
from psychoscore.utils.helpers import clamp, round_half_up
from psychoscore.utils.logger import get_logger

logger = get_logger(__name__)

PERSONALITY_CATALOG = CategoryCatalog((factor.value, factor.aliases) for factor in PrimaryFactor)

FactorScores = Mapping[PrimaryFactor, FactorScore]


def _score_of(factors: FactorScores, factor: PrimaryFactor) -> int:
    """Standardized score of a factor; absent factors count as 0."""
    scored = factors.get(factor)
    return scored.score if scored is not None else 0


class PersonalityFactorScorer:
    """Scores primary factors from their 1-5 answer values."""

    def score_factor(self, factor: PrimaryFactor, values: List[int]) -> FactorScore:
        """Score one factor.

        Args:
            factor: The primary factor
            values: Integer-coerced answers for the factor; must not be empty

        Returns:
            FactorScore: Standardized score, percentile, level and implications
        """
        raw_score = sum(values) / len(values)
        score = round_half_up(raw_score * ScoringConstants.STANDARD_SCORE_MULTIPLIER)
        percentile = clamp(
            round_half_up((score - 1) * ScoringConstants.PERCENTILE_STEP),
            ScoringConstants.MIN_PERCENTILE,
            ScoringConstants.MAX_PERCENTILE,
        )
        pole = "low" if score <= ScoringConstants.LOW_POLE_MAX_SCORE else "high"

        return FactorScore(
            factor=factor,
            raw_score=raw_score,
            score=score,
            percentile=percentile,
            level=FactorLevel.from_score(score),
            description=factor.description,
            implications=list(FACTOR_IMPLICATIONS.get((factor, pole), [])),
        )

    def score_all(self, aggregate: CategoryAggregate) -> Dict[PrimaryFactor, FactorScore]:
        """Score every factor that received at least one answer, in roster order."""
        scores: Dict[PrimaryFactor, FactorScore] = {}
        for factor in PrimaryFactor:
            values = aggregate.values_for(factor.value)
            if values:
                scores[factor] = self.score_factor(factor, values)
        return scores


class GlobalFactorSynthesizer:
    """Derives composite factors as fixed linear combinations of primaries."""

    def synthesize(self, factors: FactorScores) -> Dict[str, GlobalFactor]:
        composites: Dict[str, GlobalFactor] = {}
        for name, formula in GLOBAL_FACTOR_FORMULAS.items():
            total = sum(sign * _score_of(factors, factor) for factor, sign in formula.terms)
            value = total / formula.divisor
            composites[name.value] = GlobalFactor(
                name=name,
                score=round_half_up(value),
                level=GlobalLevel.HIGH if value > ScoringConstants.GLOBAL_HIGH_THRESHOLD else GlobalLevel.LOW,
                description=name.description,
            )
        return composites


class TypologyClassifier:
    """Assigns archetype, work-style tags and leadership potential."""

    threshold = ScoringConstants.TYPOLOGY_THRESHOLD

    def personality_type(self, factors: FactorScores) -> PersonalityType:
        for required, label in PERSONALITY_TYPE_RULES:
            if all(_score_of(factors, factor) > self.threshold for factor in required):
                return label
        return PersonalityType.BALANCED_PROFESSIONAL

    def work_style(self, factors: FactorScores) -> List[str]:
        styles = [tag for factor, tag in WORK_STYLE_TAGS if _score_of(factors, factor) > self.threshold]
        return styles or [DEFAULT_WORK_STYLE]

    def leadership_potential(self, factors: FactorScores) -> LeadershipPotential:
        leadership_score = sum(_score_of(factors, f) for f in LEADERSHIP_FACTORS) / len(LEADERSHIP_FACTORS)
        if leadership_score >= ScoringConstants.HIGH_LEADERSHIP_SCORE:
            return LeadershipPotential.HIGH
        if leadership_score >= ScoringConstants.MODERATE_LEADERSHIP_SCORE:
            return LeadershipPotential.MODERATE
        return LeadershipPotential.INDIVIDUAL


@registry.register(TestKind.PERSONALITY)
class PersonalityScorer(DomainScorer):
    """Full personality pipeline: primaries, composites, typology."""

    def __init__(self):
        self.factor_scorer = PersonalityFactorScorer()
        self.synthesizer = GlobalFactorSynthesizer()
        self.classifier = TypologyClassifier()

    @property
    def catalog(self) -> CategoryCatalog:
        return PERSONALITY_CATALOG

    def score(self, aggregate: CategoryAggregate) -> PersonalityFactors:
        factors = self.factor_scorer.score_all(aggregate)
        logger.debug(
            f"Scored {len(factors)} of {len(PrimaryFactor)} primary factors",
            extra={"scored_factors": [factor.value for factor in factors]}
        )

        return PersonalityFactors(
            primary_factors={factor.value: scored for factor, scored in factors.items()},
            global_factors=self.synthesizer.synthesize(factors),
            personality_type=self.classifier.personality_type(factors),
            work_style=self.classifier.work_style(factors),
            leadership_potential=self.classifier.leadership_potential(factors),
        )

"""Cognitive scoring for PsychoScore.

Grades each answer against its question's answer key and reports an IQ-like
overall score, six sub-ability scores, strengths, weaknesses and role
suggestions.
"""

from typing import Dict, List, Sequence

from psychoscore.models.report import CognitiveAbilities
from psychoscore.services.aggregation_service import CategoryAggregate, CategoryCatalog, MatchedAnswer
from psychoscore.services.scorers.base import DomainScorer, registry
from psychoscore.utils.constants import (
    COGNITIVE_ABILITY_ROLES,
    COGNITIVE_ROLE_TIERS,
    CognitiveAbility,
    ScoringConstants,
    TestKind,
    normalize_label,
)
from psychoscore.utils.helpers import answer_key, round_half_up

COGNITIVE_CATALOG = CategoryCatalog((ability.value, ability.aliases) for ability in CognitiveAbility)


def is_correct(item: MatchedAnswer) -> bool:
    """Whether an answer matches its question's answer key exactly."""
    if not item.question.is_graded:
        return False
    return answer_key(item.answer.answer) == answer_key(item.question.correct_answer)


@registry.register(TestKind.COGNITIVE)
class CognitiveScorer(DomainScorer):
    """Scores correctness-graded cognitive tests."""

    @property
    def catalog(self) -> CategoryCatalog:
        return COGNITIVE_CATALOG

    def score(self, aggregate: CategoryAggregate) -> CognitiveAbilities:
        overall_iq = self.overall_iq(aggregate.matched)
        abilities = {
            ability: self.ability_score(self.ability_items(aggregate, ability))
            for ability in CognitiveAbility
        }

        return CognitiveAbilities(
            overall_iq=overall_iq,
            cognitive_strengths=self._strengths(abilities),
            cognitive_weaknesses=self._weaknesses(abilities),
            recommended_roles=self._recommended_roles(overall_iq, abilities),
            **{ability.field_name: score for ability, score in abilities.items()},
        )

    def overall_iq(self, items: Sequence[MatchedAnswer]) -> int:
        """IQ-like score over every graded answer, 40 when there are none.

        Not clamped above: a perfect score reads 200.
        """
        if not items:
            return ScoringConstants.IQ_FLOOR
        correct = sum(1 for item in items if is_correct(item))
        return round_half_up(correct / len(items) * ScoringConstants.IQ_SCALE + ScoringConstants.IQ_FLOOR)

    def ability_items(self, aggregate: CategoryAggregate, ability: CognitiveAbility) -> List[MatchedAnswer]:
        """Answers for the first of the ability's labels that has any.

        Labels are tried in alias order and never merged, so answers filed
        under `language` only count for verbal reasoning when nothing is
        filed under `verbal`.
        """
        items = aggregate.matched_in(ability.value)
        for alias in ability.aliases:
            chosen = [item for item in items if normalize_label(item.label) == alias]
            if chosen:
                return chosen
        return []

    def ability_score(self, items: Sequence[MatchedAnswer]) -> int:
        if not items:
            return ScoringConstants.DEFAULT_ABILITY_SCORE
        correct = sum(1 for item in items if is_correct(item))
        return round_half_up(correct / len(items) * 100)

    def _strengths(self, abilities: Dict[CognitiveAbility, int]) -> List[str]:
        return [
            f"Strong {ability.value} reasoning abilities"
            for ability, score in abilities.items()
            if score >= ScoringConstants.ABILITY_STRENGTH_THRESHOLD
        ]

    def _weaknesses(self, abilities: Dict[CognitiveAbility, int]) -> List[str]:
        return [
            f"{ability.value} reasoning needs development"
            for ability, score in abilities.items()
            if score < ScoringConstants.ABILITY_WEAKNESS_THRESHOLD
        ]

    def _recommended_roles(self, overall_iq: int, abilities: Dict[CognitiveAbility, int]) -> List[str]:
        roles: List[str] = []
        for minimum, tier_roles in COGNITIVE_ROLE_TIERS:
            if overall_iq >= minimum:
                roles.extend(tier_roles)
                break

        for ability, ability_roles in COGNITIVE_ABILITY_ROLES:
            if abilities[ability] >= ScoringConstants.ABILITY_STRENGTH_THRESHOLD:
                roles.extend(ability_roles)
        return roles

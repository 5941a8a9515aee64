"""Technical aptitude scoring for PsychoScore."""

from typing import Dict, List, Tuple

from psychoscore.models.report import TechnicalAptitude
from psychoscore.services.aggregation_service import CategoryAggregate, CategoryCatalog
from psychoscore.services.scorers.base import DomainScorer, registry
from psychoscore.utils.constants import (
    TECHNICAL_CATEGORY_ALIASES,
    TECHNICAL_DEFAULT_LEVEL,
    TECHNICAL_DEFAULT_ROLES,
    TECHNICAL_DEFAULT_TRAINING,
    TECHNICAL_LEVELS,
    TECHNICAL_TEMPLATE,
    TECHNICAL_TRAINING_LABELS,
    ScoringConstants,
    TechnicalSkill,
    TestKind,
)
from psychoscore.utils.helpers import mean

TECHNICAL_CATALOG = CategoryCatalog(
    (skill.value, TECHNICAL_CATEGORY_ALIASES[skill]) for skill in TechnicalSkill
)


@registry.register(TestKind.TECHNICAL)
class TechnicalScorer(DomainScorer):
    """Scores technical aptitude questionnaires answered on a 1-5 scale."""

    @property
    def catalog(self) -> CategoryCatalog:
        return TECHNICAL_CATALOG

    def score(self, aggregate: CategoryAggregate) -> TechnicalAptitude:
        measured = self.sub_scores(aggregate)
        if not measured:
            return self.baseline()

        scores: Dict[TechnicalSkill, int] = {
            skill: measured.get(skill.value, TECHNICAL_TEMPLATE[skill]) for skill in TechnicalSkill
        }
        level, roles = self.aptitude_level(mean(list(measured.values())))

        return TechnicalAptitude(
            technical_aptitude_level=level,
            suitable_roles=roles,
            training_needs=[
                TECHNICAL_TRAINING_LABELS[skill]
                for skill in TechnicalSkill
                if skill.value in measured and scores[skill] < ScoringConstants.TECHNICAL_TRAINING_THRESHOLD
            ],
            **{skill.value: score for skill, score in scores.items()},
        )

    def aptitude_level(self, average: float) -> Tuple[str, List[str]]:
        """Level label and suitable roles for a mean sub-score."""
        for minimum, level, roles in TECHNICAL_LEVELS:
            if average >= minimum:
                return level, list(roles)
        _, level, roles = TECHNICAL_LEVELS[-1]
        return level, list(roles)

    def baseline(self) -> TechnicalAptitude:
        return TechnicalAptitude(
            technical_aptitude_level=TECHNICAL_DEFAULT_LEVEL,
            suitable_roles=list(TECHNICAL_DEFAULT_ROLES),
            training_needs=list(TECHNICAL_DEFAULT_TRAINING),
            **{skill.value: score for skill, score in TECHNICAL_TEMPLATE.items()},
        )

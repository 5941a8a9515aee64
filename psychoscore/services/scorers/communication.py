"""Communication skills scoring for PsychoScore."""

from typing import Dict

from psychoscore.models.report import CommunicationSkills
from psychoscore.services.aggregation_service import CategoryAggregate, CategoryCatalog
from psychoscore.services.scorers.base import DomainScorer, registry
from psychoscore.utils.constants import (
    COMMUNICATION_CATEGORY_ALIASES,
    COMMUNICATION_DEFAULT_IMPROVEMENTS,
    COMMUNICATION_DEFAULT_STYLE,
    COMMUNICATION_IMPROVEMENT_LABELS,
    COMMUNICATION_STYLES,
    COMMUNICATION_TEMPLATE,
    CommunicationSkill,
    ScoringConstants,
    TestKind,
)

COMMUNICATION_CATALOG = CategoryCatalog(
    (skill.value, COMMUNICATION_CATEGORY_ALIASES[skill]) for skill in CommunicationSkill
)


@registry.register(TestKind.COMMUNICATION)
class CommunicationScorer(DomainScorer):
    """Scores communication questionnaires answered on a 1-5 scale.

    Skills without usable answers keep their baseline value. With no usable
    answers at all the baseline profile is returned unchanged.
    """

    @property
    def catalog(self) -> CategoryCatalog:
        return COMMUNICATION_CATALOG

    def score(self, aggregate: CategoryAggregate) -> CommunicationSkills:
        measured = self.sub_scores(aggregate)
        if not measured:
            return self.baseline()

        scores: Dict[CommunicationSkill, int] = {
            skill: measured.get(skill.value, COMMUNICATION_TEMPLATE[skill]) for skill in CommunicationSkill
        }
        measured_skills = [skill for skill in CommunicationSkill if skill.value in measured]
        strongest = max(measured_skills, key=lambda skill: scores[skill])

        return CommunicationSkills(
            communication_style=COMMUNICATION_STYLES[strongest],
            improvement_areas=[
                COMMUNICATION_IMPROVEMENT_LABELS[skill]
                for skill in measured_skills
                if scores[skill] < ScoringConstants.COMMUNICATION_IMPROVEMENT_THRESHOLD
            ],
            **{skill.value: score for skill, score in scores.items()},
        )

    def baseline(self) -> CommunicationSkills:
        return CommunicationSkills(
            communication_style=COMMUNICATION_DEFAULT_STYLE,
            improvement_areas=list(COMMUNICATION_DEFAULT_IMPROVEMENTS),
            **{skill.value: score for skill, score in COMMUNICATION_TEMPLATE.items()},
        )

"""Culture fit scoring for PsychoScore."""

from typing import Dict, List

from psychoscore.models.report import CulturalFit
from psychoscore.services.aggregation_service import CategoryAggregate, CategoryCatalog
from psychoscore.services.scorers.base import DomainScorer, registry
from psychoscore.utils.constants import (
    CULTURE_ALIGNMENT_RECOMMENDATION,
    CULTURE_BASE_RECOMMENDATION,
    CULTURE_CATEGORY_ALIASES,
    CULTURE_CORE_TEMPLATE,
    CULTURE_DEFAULT_ALIGNMENT,
    CULTURE_DEFAULT_FIT,
    CULTURE_DEFAULT_RECOMMENDATIONS,
    CULTURE_DEFAULT_TEAM_FIT,
    CULTURE_FIT_BANDS,
    CULTURE_FIT_FLOOR,
    CULTURE_TEAM_FIT_RECOMMENDATION,
    CULTURE_WORK_TEMPLATE,
    CoreValue,
    ScoringConstants,
    TestKind,
    band_for,
)
from psychoscore.utils.helpers import mean, round_half_up

CULTURE_CATALOG = CategoryCatalog(CULTURE_CATEGORY_ALIASES.items())

STRONG_ALIGNMENT = CULTURE_FIT_BANDS[0][0]


@registry.register(TestKind.CULTURE)
class CultureScorer(DomainScorer):
    """Scores core and work values and derives team and organizational fit."""

    @property
    def catalog(self) -> CategoryCatalog:
        return CULTURE_CATALOG

    def score(self, aggregate: CategoryAggregate) -> CulturalFit:
        measured = self.sub_scores(aggregate)
        if not measured:
            return self.baseline()

        core_values = {value.value: measured.get(value.value, score) for value, score in CULTURE_CORE_TEMPLATE.items()}
        work_values = {value.value: measured.get(value.value, score) for value, score in CULTURE_WORK_TEMPLATE.items()}
        alignment = round_half_up(mean(list(core_values.values())))
        team_fit = core_values[CoreValue.TEAMWORK.value]

        return CulturalFit(
            core_values=core_values,
            work_values=work_values,
            cultural_alignment=alignment,
            team_fit=team_fit,
            organizational_fit=band_for(alignment, CULTURE_FIT_BANDS, CULTURE_FIT_FLOOR),
            integration_recommendations=self._recommendations(alignment, team_fit),
        )

    def _recommendations(self, alignment: int, team_fit: int) -> List[str]:
        recommendations: List[str] = []
        if team_fit < ScoringConstants.TEAM_FIT_THRESHOLD:
            recommendations.append(CULTURE_TEAM_FIT_RECOMMENDATION)
        if alignment < STRONG_ALIGNMENT:
            recommendations.append(CULTURE_ALIGNMENT_RECOMMENDATION)
        recommendations.append(CULTURE_BASE_RECOMMENDATION)
        return recommendations

    def baseline(self) -> CulturalFit:
        core_values: Dict[str, int] = {value.value: score for value, score in CULTURE_CORE_TEMPLATE.items()}
        work_values: Dict[str, int] = {value.value: score for value, score in CULTURE_WORK_TEMPLATE.items()}
        return CulturalFit(
            core_values=core_values,
            work_values=work_values,
            cultural_alignment=CULTURE_DEFAULT_ALIGNMENT,
            team_fit=CULTURE_DEFAULT_TEAM_FIT,
            organizational_fit=CULTURE_DEFAULT_FIT,
            integration_recommendations=list(CULTURE_DEFAULT_RECOMMENDATIONS),
        )

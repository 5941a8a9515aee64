"""Interpretation and recommendation synthesis for PsychoScore.

This service is the only producer of report prose. It does no scoring:
domain-specific lines come from the domain analysis itself, and the rest is
driven by the overall score and the reliability verdict.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from psychoscore.models.report import DomainAnalysisBase, Recommendations
from psychoscore.utils.constants import RecommendationConstants, ReliabilityVerdict, band_for


class Synthesis(BaseModel):
    """Prose sections of a report."""

    interpretations: List[str] = Field(default_factory=list)
    recommendations: Recommendations = Field(default_factory=Recommendations)
    strengths: List[str] = Field(default_factory=list)
    areas_for_improvement: List[str] = Field(default_factory=list)
    risk_factors: List[str] = Field(default_factory=list)


class InterpretationSynthesizer:
    """Builds interpretations, recommendations, strengths and risks."""

    def synthesize(
        self,
        overall_score: int,
        reliability: ReliabilityVerdict,
        domain: Optional[DomainAnalysisBase],
    ) -> Synthesis:
        """Synthesize the prose sections of a report.

        Args:
            overall_score: Overall score (0-100)
            reliability: Reliability verdict
            domain: Domain analysis, or None for an unsupported kind

        Returns:
            Synthesis: Interpretations, recommendations, strengths and risks
        """
        domain = domain or DomainAnalysisBase()

        return Synthesis(
            interpretations=self.interpretations(overall_score, reliability, domain),
            recommendations=Recommendations(
                hiring=self.hiring(overall_score),
                development=domain.development_items() + list(RecommendationConstants.STANDARD_DEVELOPMENT),
                placement=domain.placement_items(),
            ),
            strengths=domain.strength_items(),
            areas_for_improvement=domain.improvement_items(),
            risk_factors=self.risk_factors(overall_score, reliability, domain),
        )

    def interpretations(
        self,
        overall_score: int,
        reliability: ReliabilityVerdict,
        domain: DomainAnalysisBase,
    ) -> List[str]:
        return domain.interpretation_lines() + [
            f"Test Reliability: {reliability.value}",
            f"Overall Performance: {self.performance_band(overall_score)}",
        ]

    def performance_band(self, overall_score: int) -> str:
        return band_for(
            overall_score,
            RecommendationConstants.PERFORMANCE_BANDS,
            RecommendationConstants.PERFORMANCE_FLOOR,
        )

    def hiring(self, overall_score: int) -> List[str]:
        for minimum, lines in RecommendationConstants.HIRING_TIERS:
            if overall_score >= minimum:
                return list(lines)
        return list(RecommendationConstants.HIRING_FLOOR)

    def risk_factors(
        self,
        overall_score: int,
        reliability: ReliabilityVerdict,
        domain: DomainAnalysisBase,
    ) -> List[str]:
        risks: List[str] = []
        if not reliability.is_reliable:
            risks.append(f"Test reliability concern: {reliability.value}")
        if overall_score < RecommendationConstants.VERY_LOW_PERFORMANCE_SCORE:
            risks.append(RecommendationConstants.VERY_LOW_PERFORMANCE_RISK)
        risks.extend(domain.risk_items())
        return risks

"""Report models for PsychoScore.

This module defines the assessment report and its domain analysis variants.
Each variant knows how to contribute its own interpretation lines,
strengths, improvement areas, recommendations and risks, so the synthesizer
never needs to know which domains exist.
"""

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import Field

from psychoscore.models.assessment import CandidateInfo
from psychoscore.models.base import FrozenDict, ReportSection, empty_mapping
from psychoscore.utils.constants import (
    CognitiveAbility,
    FactorLevel,
    GlobalFactorName,
    GlobalLevel,
    IQ_BANDS,
    IQ_FLOOR_BAND,
    LeadershipPotential,
    PersonalityType,
    PrimaryFactor,
    RecommendationConstants,
    ReliabilityVerdict,
    band_for,
)


class FactorScore(ReportSection):
    """Score for one primary personality factor."""

    factor: PrimaryFactor
    raw_score: float
    score: int
    percentile: int = Field(..., ge=1, le=99)
    level: FactorLevel
    description: str
    implications: Tuple[str, ...] = ()


class GlobalFactor(ReportSection):
    """Score for one composite factor."""

    name: GlobalFactorName
    score: int
    level: GlobalLevel
    description: str


class DomainAnalysisBase(ReportSection):
    """Shared contract of every domain analysis variant.

    The hook methods return nothing by default; variants override the ones
    they have content for.
    """

    def interpretation_lines(self) -> List[str]:
        return []

    def strength_items(self) -> List[str]:
        return []

    def improvement_items(self) -> List[str]:
        return []

    def development_items(self) -> List[str]:
        return []

    def placement_items(self) -> List[str]:
        return []

    def risk_items(self) -> List[str]:
        return []


class PersonalityFactors(DomainAnalysisBase):
    """Primary factors, composites and typology for a personality test."""

    kind: Literal["personality"] = "personality"
    primary_factors: FrozenDict[str, FactorScore] = Field(default_factory=empty_mapping)
    global_factors: FrozenDict[str, GlobalFactor] = Field(default_factory=empty_mapping)
    personality_type: PersonalityType
    work_style: Tuple[str, ...] = ()
    leadership_potential: LeadershipPotential

    def interpretation_lines(self) -> List[str]:
        return [
            f"Personality Type: {self.personality_type.value}",
            f"Work Style: {', '.join(self.work_style)}",
            f"Leadership Assessment: {self.leadership_potential.value}",
        ]

    def strength_items(self) -> List[str]:
        return [
            f"{name}: {factor.description}"
            for name, factor in self.primary_factors.items()
            if factor.level.is_high
        ]

    def improvement_items(self) -> List[str]:
        return [
            f"{name}: Consider development in {factor.description}"
            for name, factor in self.primary_factors.items()
            if factor.level.is_low
        ]

    def development_items(self) -> List[str]:
        if self.leadership_potential.is_high:
            return [RecommendationConstants.LEADERSHIP_DEVELOPMENT]
        return []

    def placement_items(self) -> List[str]:
        if self.leadership_potential.is_high:
            return [RecommendationConstants.LEADERSHIP_PLACEMENT]
        return []

    def risk_items(self) -> List[str]:
        anxiety = self.global_factors.get(GlobalFactorName.ANXIETY.value)
        if anxiety is not None and anxiety.score > RecommendationConstants.HIGH_ANXIETY_SCORE:
            return [RecommendationConstants.HIGH_ANXIETY_RISK]
        return []


class CognitiveAbilities(DomainAnalysisBase):
    """Overall IQ-like score and six sub-abilities for a cognitive test."""

    kind: Literal["cognitive"] = "cognitive"
    overall_iq: int = Field(..., alias="overallIQ")
    verbal_reasoning: int
    numerical_reasoning: int
    logical_reasoning: int
    spatial_reasoning: int
    processing_speed: int
    working_memory: int
    cognitive_strengths: Tuple[str, ...] = ()
    cognitive_weaknesses: Tuple[str, ...] = ()
    recommended_roles: Tuple[str, ...] = ()

    def ability_score(self, ability: CognitiveAbility) -> int:
        return getattr(self, ability.field_name)

    @property
    def iq_band(self) -> str:
        return band_for(self.overall_iq, IQ_BANDS, IQ_FLOOR_BAND)

    def interpretation_lines(self) -> List[str]:
        strongest = ", ".join(self.cognitive_strengths)
        return [
            f"Cognitive Level: IQ {self.overall_iq} ({self.iq_band})",
            f"Strongest Areas: {strongest}",
        ]

    def strength_items(self) -> List[str]:
        return list(self.cognitive_strengths)

    def improvement_items(self) -> List[str]:
        return list(self.cognitive_weaknesses)

    def placement_items(self) -> List[str]:
        return list(self.recommended_roles)


class CommunicationSkills(DomainAnalysisBase):
    kind: Literal["communication"] = "communication"
    verbal_communication: int
    written_communication: int
    listening_skills: int
    persuasion_ability: int
    conflict_resolution: int
    team_communication: int
    communication_style: str
    improvement_areas: Tuple[str, ...] = ()


class TechnicalAptitude(DomainAnalysisBase):
    kind: Literal["technical"] = "technical"
    problem_solving: int
    analytical_thinking: int
    technical_knowledge: int
    learning_agility: int
    attention_to_detail: int
    technical_aptitude_level: str
    suitable_roles: Tuple[str, ...] = ()
    training_needs: Tuple[str, ...] = ()


class CulturalFit(DomainAnalysisBase):
    kind: Literal["culture"] = "culture"
    core_values: FrozenDict[str, int] = Field(default_factory=empty_mapping)
    work_values: FrozenDict[str, int] = Field(default_factory=empty_mapping)
    cultural_alignment: int
    team_fit: int
    organizational_fit: str
    integration_recommendations: Tuple[str, ...] = ()


DomainAnalysis = Annotated[
    Union[PersonalityFactors, CognitiveAbilities, CommunicationSkills, TechnicalAptitude, CulturalFit],
    Field(discriminator="kind"),
]


class Recommendations(ReportSection):
    hiring: Tuple[str, ...] = ()
    development: Tuple[str, ...] = ()
    placement: Tuple[str, ...] = ()


class AssessmentReport(ReportSection):
    """Final, immutable result of one scoring run."""

    test_name: str
    test_kind: Optional[str] = None
    candidate: CandidateInfo
    overall_score: int = Field(..., ge=0, le=100)
    reliability: ReliabilityVerdict
    completion_time: int
    domain_analysis: Optional[DomainAnalysis] = None
    category_scores: FrozenDict[str, int] = Field(default_factory=empty_mapping)
    unrecognized_categories: FrozenDict[str, int] = Field(default_factory=empty_mapping)
    interpretations: Tuple[str, ...] = ()
    recommendations: Recommendations = Field(default_factory=Recommendations)
    strengths: Tuple[str, ...] = ()
    areas_for_improvement: Tuple[str, ...] = ()
    risk_factors: Tuple[str, ...] = ()
    verification_score: int = Field(..., ge=0, le=100)

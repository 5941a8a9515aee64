"""Unit tests for InterpretationSynthesizer."""

import pytest

from psychoscore.models.report import CognitiveAbilities, GlobalFactor, PersonalityFactors
from psychoscore.services.interpretation_service import InterpretationSynthesizer
from psychoscore.utils.constants import (
    GlobalFactorName,
    GlobalLevel,
    LeadershipPotential,
    PersonalityType,
    ReliabilityVerdict,
)

STANDARD_DEVELOPMENT = ("Regular performance reviews", "Continuous learning opportunities")


def personality(leadership=LeadershipPotential.MODERATE, anxiety=3):
    return PersonalityFactors(
        global_factors={
            "Anxiety": GlobalFactor(
                name=GlobalFactorName.ANXIETY,
                score=anxiety,
                level=GlobalLevel.HIGH if anxiety > 5 else GlobalLevel.LOW,
                description=GlobalFactorName.ANXIETY.description,
            )
        },
        personality_type=PersonalityType.TEAM_PLAYER,
        work_style=["Collaborative", "Structured"],
        leadership_potential=leadership,
    )


class TestInterpretationSynthesizer:
    """Test suite for InterpretationSynthesizer."""

    @pytest.fixture
    def synthesizer(self):
        return InterpretationSynthesizer()

    @pytest.mark.parametrize("score,band", [
        (95, "Exceptional"),
        (90, "Exceptional"),
        (80, "Excellent"),
        (70, "Good"),
        (60, "Satisfactory"),
        (50, "Below Average"),
        (49, "Poor"),
    ])
    def test_performance_bands(self, synthesizer, score, band):
        assert synthesizer.performance_band(score) == band

    @pytest.mark.parametrize("score,first_line", [
        (75, "Highly recommended for hire"),
        (60, "Recommended for hire with development support"),
        (59, "Consider for entry-level positions with extensive training"),
    ])
    def test_hiring_tiers(self, synthesizer, score, first_line):
        assert synthesizer.hiring(score)[0] == first_line

    def test_without_domain_analysis(self, synthesizer):
        synthesis = synthesizer.synthesize(65, ReliabilityVerdict.RELIABLE, None)

        assert synthesis.interpretations == [
            "Test Reliability: Reliable",
            "Overall Performance: Satisfactory",
        ]
        assert synthesis.recommendations.development == STANDARD_DEVELOPMENT
        assert synthesis.recommendations.placement == ()
        assert synthesis.strengths == []
        assert synthesis.risk_factors == []

    def test_personality_lines_come_first(self, synthesizer):
        synthesis = synthesizer.synthesize(82, ReliabilityVerdict.RELIABLE, personality())

        assert synthesis.interpretations == [
            "Personality Type: Team Player",
            "Work Style: Collaborative, Structured",
            "Leadership Assessment: Moderate Leadership Potential",
            "Test Reliability: Reliable",
            "Overall Performance: Excellent",
        ]

    def test_high_leadership_adds_development_and_placement(self, synthesizer):
        synthesis = synthesizer.synthesize(82, ReliabilityVerdict.RELIABLE, personality(LeadershipPotential.HIGH))

        assert synthesis.recommendations.development == ("Leadership development program",) + STANDARD_DEVELOPMENT
        assert synthesis.recommendations.placement == ("Management track positions",)

    def test_risk_factors(self, synthesizer):
        synthesis = synthesizer.synthesize(30, ReliabilityVerdict.TOO_FAST, personality(anxiety=8))

        assert synthesis.risk_factors == [
            "Test reliability concern: Questionable - Too Fast",
            "Very low overall performance - significant training required",
            "High anxiety levels - may affect performance under stress",
        ]

    def test_anxiety_of_seven_is_not_a_risk(self, synthesizer):
        synthesis = synthesizer.synthesize(70, ReliabilityVerdict.RELIABLE, personality(anxiety=7))

        assert synthesis.risk_factors == []

    def test_cognitive_roles_become_placement(self, synthesizer):
        domain = CognitiveAbilities(
            overall_iq=112,
            verbal_reasoning=80,
            numerical_reasoning=50,
            logical_reasoning=50,
            spatial_reasoning=40,
            processing_speed=50,
            working_memory=50,
            cognitive_strengths=["Strong verbal reasoning abilities"],
            cognitive_weaknesses=["spatial reasoning needs development"],
            recommended_roles=["Project Management", "Communications"],
        )

        synthesis = synthesizer.synthesize(70, ReliabilityVerdict.RELIABLE, domain)

        assert synthesis.interpretations[:2] == [
            "Cognitive Level: IQ 112 (High Average)",
            "Strongest Areas: Strong verbal reasoning abilities",
        ]
        assert synthesis.strengths == ["Strong verbal reasoning abilities"]
        assert synthesis.areas_for_improvement == ["spatial reasoning needs development"]
        assert synthesis.recommendations.placement == ("Project Management", "Communications")

"""Unit tests for personality factor scoring, composites and typology."""

import pytest

from psychoscore.models.report import FactorScore
from psychoscore.services.aggregation_service import ResponseAggregator
from psychoscore.services.scorers.personality import (
    PERSONALITY_CATALOG,
    GlobalFactorSynthesizer,
    PersonalityFactorScorer,
    PersonalityScorer,
    TypologyClassifier,
)
from psychoscore.utils.constants import (
    FactorLevel,
    GlobalLevel,
    LeadershipPotential,
    PersonalityType,
    PrimaryFactor,
)


def factor_scores(**scores):
    """FactorScore map from keyword scores, e.g. WARMTH=8."""
    result = {}
    for name, score in scores.items():
        factor = PrimaryFactor[name]
        result[factor] = FactorScore(
            factor=factor,
            raw_score=score / 2,
            score=score,
            percentile=max(1, min(99, round((score - 1) * 11.11))),
            level=FactorLevel.from_score(score),
            description=factor.description,
        )
    return result


class TestPersonalityFactorScorer:
    """Test suite for PersonalityFactorScorer."""

    @pytest.fixture
    def scorer(self):
        return PersonalityFactorScorer()

    def test_warmth_scenario(self, scorer):
        scored = scorer.score_factor(PrimaryFactor.WARMTH, [4, 5])

        assert scored.raw_score == 4.5
        assert scored.score == 9
        assert scored.level is FactorLevel.VERY_HIGH
        assert scored.percentile == 89
        assert scored.description == "Reserved vs. Warm"
        assert scored.implications == (
            "Strong interpersonal skills",
            "Team-oriented",
            "Empathetic and caring",
        )

    @pytest.mark.parametrize("values,score,percentile", [
        ([5, 5], 10, 99),
        ([1], 2, 11),
        ([0, 1], 1, 1),
        ([3], 6, 56),
    ])
    def test_percentile_is_clamped(self, scorer, values, score, percentile):
        scored = scorer.score_factor(PrimaryFactor.REASONING, values)

        assert scored.score == score
        assert scored.percentile == percentile

    def test_low_pole_implications(self, scorer):
        scored = scorer.score_factor(PrimaryFactor.DOMINANCE, [2, 2])

        assert scored.score == 4
        assert scored.level is FactorLevel.LOW
        assert scored.implications[0] == "Collaborative approach"

    def test_factors_without_implications_get_none(self, scorer):
        assert scorer.score_factor(PrimaryFactor.TENSION, [5]).implications == ()

    def test_score_all_omits_unanswered_factors(self, scorer, warmth_test, warmth_responses):
        aggregate = ResponseAggregator().aggregate(warmth_test, warmth_responses, PERSONALITY_CATALOG)

        scores = scorer.score_all(aggregate)

        assert list(scores) == [PrimaryFactor.WARMTH]


class TestGlobalFactorSynthesizer:
    """Test suite for GlobalFactorSynthesizer."""

    @pytest.fixture
    def synthesizer(self):
        return GlobalFactorSynthesizer()

    def test_missing_primaries_count_as_zero(self, synthesizer):
        composites = synthesizer.synthesize(factor_scores(WARMTH=9))

        extraversion = composites["Extraversion"]
        assert extraversion.score == 2
        assert extraversion.level is GlobalLevel.LOW
        assert composites["Anxiety"].score == 0
        assert list(composites) == [
            "Extraversion",
            "Anxiety",
            "Tough-Mindedness",
            "Independence",
            "Self-Control",
        ]

    def test_negative_composites_round_half_up(self, synthesizer):
        composites = synthesizer.synthesize(factor_scores(PRIVATENESS=10))

        assert composites["Extraversion"].score == -2

    def test_level_uses_unrounded_value(self, synthesizer):
        # (8 + 8) / 3 = 5.33, above the threshold of 5
        composites = synthesizer.synthesize(factor_scores(APPREHENSION=8, TENSION=8))
        # (4 + 4 + 7) / 3 = 5.0, not above it
        independence = synthesizer.synthesize(
            factor_scores(DOMINANCE=4, OPENNESS_TO_CHANGE=4, SELF_RELIANCE=7)
        )["Independence"]

        assert composites["Anxiety"].level is GlobalLevel.HIGH
        assert composites["Anxiety"].score == 5
        assert independence.level is GlobalLevel.LOW


class TestTypologyClassifier:
    """Test suite for TypologyClassifier."""

    @pytest.fixture
    def classifier(self):
        return TypologyClassifier()

    @pytest.mark.parametrize("scores,expected", [
        ({"DOMINANCE": 8, "WARMTH": 8, "EMOTIONAL_STABILITY": 8}, PersonalityType.NATURAL_LEADER),
        ({"WARMTH": 7, "EMOTIONAL_STABILITY": 7}, PersonalityType.TEAM_PLAYER),
        ({"OPENNESS_TO_CHANGE": 7, "REASONING": 7}, PersonalityType.INNOVATOR),
        ({"EMOTIONAL_STABILITY": 7, "RULE_CONSCIOUSNESS": 7}, PersonalityType.RELIABLE_EXECUTOR),
        ({"SELF_RELIANCE": 9}, PersonalityType.INDEPENDENT_CONTRIBUTOR),
        ({"DOMINANCE": 6, "WARMTH": 6}, PersonalityType.BALANCED_PROFESSIONAL),
        ({}, PersonalityType.BALANCED_PROFESSIONAL),
    ])
    def test_first_matching_rule_wins(self, classifier, scores, expected):
        assert classifier.personality_type(factor_scores(**scores)) is expected

    def test_work_style_tags_accumulate(self, classifier):
        styles = classifier.work_style(factor_scores(WARMTH=7, PERFECTIONISM=8, RULE_CONSCIOUSNESS=10))

        assert styles == ["Collaborative", "Detail-oriented", "Structured"]

    def test_work_style_default(self, classifier):
        assert classifier.work_style(factor_scores(WARMTH=6)) == ["Balanced approach"]

    @pytest.mark.parametrize("scores,expected", [
        ({"DOMINANCE": 7, "EMOTIONAL_STABILITY": 7, "WARMTH": 7, "REASONING": 7}, LeadershipPotential.HIGH),
        ({"DOMINANCE": 5, "EMOTIONAL_STABILITY": 5, "WARMTH": 5, "REASONING": 5}, LeadershipPotential.MODERATE),
        ({"DOMINANCE": 10, "WARMTH": 9}, LeadershipPotential.INDIVIDUAL),
    ])
    def test_leadership_potential(self, classifier, scores, expected):
        assert classifier.leadership_potential(factor_scores(**scores)) is expected


class TestPersonalityScorer:
    """Test suite for the registered personality scorer."""

    def test_scores_full_profile(self, warmth_test, warmth_responses):
        scorer = PersonalityScorer()
        aggregate = ResponseAggregator().aggregate(warmth_test, warmth_responses, scorer.catalog)

        analysis = scorer.score(aggregate)

        assert list(analysis.primary_factors) == ["Warmth (A)"]
        assert analysis.primary_factors["Warmth (A)"].score == 9
        assert len(analysis.global_factors) == 5
        assert analysis.personality_type is PersonalityType.BALANCED_PROFESSIONAL
        assert analysis.work_style == ("Collaborative",)
        assert analysis.leadership_potential is LeadershipPotential.INDIVIDUAL
        assert analysis.strength_items() == ["Warmth (A): Reserved vs. Warm"]

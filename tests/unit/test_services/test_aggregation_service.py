"""Unit tests for ResponseAggregator and CategoryCatalog."""

import pytest

from psychoscore.services.aggregation_service import CategoryCatalog, ResponseAggregator, build_catalog
from psychoscore.services.scorers.cognitive import COGNITIVE_CATALOG
from psychoscore.services.scorers.personality import PERSONALITY_CATALOG


class TestCategoryCatalog:
    """Test suite for CategoryCatalog."""

    @pytest.mark.parametrize("label", ["Warmth (A)", "warmth", "WARMTH", "warmth_a"])
    def test_resolves_aliases_to_canonical_key(self, label):
        assert PERSONALITY_CATALOG.resolve(label) == "Warmth (A)"

    @pytest.mark.parametrize("label", [None, "", "Charisma"])
    def test_unknown_labels_resolve_to_none(self, label):
        assert PERSONALITY_CATALOG.resolve(label) is None

    def test_keys_keep_roster_order(self):
        assert PERSONALITY_CATALOG.keys[0] == "Warmth (A)"
        assert PERSONALITY_CATALOG.keys[-1] == "Tension (Q4)"
        assert len(PERSONALITY_CATALOG) == 16

    def test_conflicting_alias_is_rejected(self):
        with pytest.raises(ValueError, match="maps to both"):
            CategoryCatalog([("alpha", ["shared"]), ("beta", ["shared"])])

    def test_build_catalog_from_mapping(self):
        catalog = build_catalog({"speed": ["fast"], "memory": []})

        assert catalog.keys == ["speed", "memory"]
        assert catalog.resolve("Fast") == "speed"
        assert "memory" in catalog


class TestResponseAggregator:
    """Test suite for ResponseAggregator."""

    @pytest.fixture
    def aggregator(self):
        return ResponseAggregator()

    def test_groups_values_by_canonical_category(self, aggregator, make_test, make_responses):
        test = make_test("personality", [(1, "Warmth (A)"), (2, "warmth"), (3, "Dominance (E)")])
        responses = make_responses([(1, "4"), (2, "5"), (3, "2")])

        aggregate = aggregator.aggregate(test, responses, PERSONALITY_CATALOG)

        assert aggregate.values == {"Warmth (A)": [4, 5], "Dominance (E)": [2]}
        assert aggregate.matched_count == 3

    def test_categories_without_answers_are_omitted(self, aggregator, warmth_test, make_responses):
        aggregate = aggregator.aggregate(warmth_test, make_responses([]), PERSONALITY_CATALOG)

        assert aggregate.values == {}
        assert aggregate.values_for("Warmth (A)") == []

    def test_unknown_question_ids_are_dropped(self, aggregator, warmth_test, make_responses):
        responses = make_responses([(1, "4"), (42, "5")])

        aggregate = aggregator.aggregate(warmth_test, responses, PERSONALITY_CATALOG)

        assert aggregate.values == {"Warmth (A)": [4]}
        assert aggregate.matched_count == 1

    def test_question_ids_match_across_types(self, aggregator, warmth_test, make_responses):
        aggregate = aggregator.aggregate(warmth_test, make_responses([("1", "4"), (2.0, "5")]), PERSONALITY_CATALOG)

        assert aggregate.values == {"Warmth (A)": [4, 5]}

    def test_non_numeric_answers_count_as_zero(self, aggregator, warmth_test, make_responses):
        aggregate = aggregator.aggregate(warmth_test, make_responses([(1, "abc"), (2, None)]), PERSONALITY_CATALOG)

        assert aggregate.values == {"Warmth (A)": [0, 0]}

    def test_unrecognized_categories_are_quarantined(self, aggregator, make_test, make_responses):
        test = make_test("personality", [(1, "Charisma"), (2, "Charisma"), (3, "Warmth (A)")])
        responses = make_responses([(1, "5"), (2, "5"), (3, "3")])

        aggregate = aggregator.aggregate(test, responses, PERSONALITY_CATALOG)

        assert aggregate.values == {"Warmth (A)": [3]}
        assert aggregate.unrecognized == {"Charisma": 2}

    def test_answer_category_used_when_question_has_none(self, aggregator, make_test, make_responses):
        test = make_test("cognitive", [{"id": 1}])
        responses = make_responses([{"questionId": 1, "answer": "B", "category": "math"}])

        aggregate = aggregator.aggregate(test, responses, COGNITIVE_CATALOG)

        assert aggregate.values == {"numerical": [0]}
        assert len(aggregate.matched_in("numerical")) == 1

    def test_cognitive_aliases_share_one_key(self, aggregator, make_test, make_responses):
        test = make_test("cognitive", [(1, "math"), (2, "numerical_reasoning"), (3, "Numerical")])
        responses = make_responses([(1, "1"), (2, "2"), (3, "3")])

        aggregate = aggregator.aggregate(test, responses, COGNITIVE_CATALOG)

        assert aggregate.values == {"numerical": [1, 2, 3]}

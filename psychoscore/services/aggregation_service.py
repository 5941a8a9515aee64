"""Response aggregation for PsychoScore.

This service joins each answer to its question, resolves the question's
category label against a closed catalog of known categories, and groups
integer-coerced answer values per category. Labels that match no catalog key
are quarantined instead of being scored.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from psychoscore.models.assessment import Answer, Question, ResponseSet, TestDefinition
from psychoscore.utils.constants import normalize_label
from psychoscore.utils.helpers import parse_int
from psychoscore.utils.logger import get_logger

logger = get_logger(__name__)


class CategoryCatalog:
    """Ordered, closed set of category keys with their accepted aliases."""

    def __init__(self, entries: Iterable[Tuple[str, Iterable[str]]]):
        """Initialize the catalog.

        Args:
            entries: (canonical key, aliases) pairs in report order. The key
                itself is always accepted as an alias.

        Raises:
            ValueError: If an alias is claimed by two keys
        """
        self._keys: List[str] = []
        self._aliases: Dict[str, str] = {}

        for key, aliases in entries:
            self._keys.append(key)
            for alias in (key, *aliases):
                normalized = normalize_label(alias)
                owner = self._aliases.setdefault(normalized, key)
                if owner != key:
                    raise ValueError(f"Category alias '{alias}' maps to both '{owner}' and '{key}'")

    @property
    def keys(self) -> List[str]:
        return list(self._keys)

    def resolve(self, label: Optional[str]) -> Optional[str]:
        """Resolve a raw category label to its canonical key.

        Args:
            label: Category label from the question

        Returns:
            Optional[str]: Canonical key, or None when the label is unknown
        """
        if not label:
            return None
        return self._aliases.get(normalize_label(label))

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)


class MatchedAnswer(NamedTuple):
    """An answer joined to its question, with the resolved category key."""

    answer: Answer
    question: Question
    category_key: Optional[str]

    @property
    def label(self) -> Optional[str]:
        """Raw category label, from the question first and then the answer."""
        return self.question.category or self.answer.category

    @property
    def value(self) -> int:
        return parse_int(self.answer.answer)


class CategoryAggregate(BaseModel):
    """Answers grouped by canonical category."""

    model_config = ConfigDict(frozen=True)

    values: Dict[str, List[int]] = Field(default_factory=dict)
    unrecognized: Dict[str, int] = Field(default_factory=dict)
    matched: List[MatchedAnswer] = Field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    def values_for(self, key: str) -> List[int]:
        return self.values.get(key, [])

    def matched_in(self, key: str) -> List[MatchedAnswer]:
        return [item for item in self.matched if item.category_key == key]


class ResponseAggregator:
    """Groups a response set by category for a given catalog."""

    def aggregate(
        self,
        test: TestDefinition,
        responses: ResponseSet,
        catalog: CategoryCatalog,
    ) -> CategoryAggregate:
        """Aggregate answers by canonical category.

        Answers whose question id is not in the test are dropped. Answers to
        questions without a category are kept as matched but belong to no
        category.

        Args:
            test: Test definition holding the questions
            responses: Completed response set
            catalog: Known categories for the test kind

        Returns:
            CategoryAggregate: Values per category in catalog order
        """
        questions = test.question_index()
        grouped: Dict[str, List[int]] = {key: [] for key in catalog.keys}
        unrecognized: "OrderedDict[str, int]" = OrderedDict()
        matched: List[MatchedAnswer] = []
        dropped = 0

        for answer in responses.answers:
            question = questions.get(answer.question_key)
            if question is None:
                dropped += 1
                continue

            label = question.category or answer.category
            item = MatchedAnswer(answer=answer, question=question, category_key=catalog.resolve(label))
            matched.append(item)

            if item.category_key is not None:
                grouped[item.category_key].append(item.value)
            elif label:
                unrecognized[label] = unrecognized.get(label, 0) + 1

        if dropped:
            logger.debug(
                f"Dropped {dropped} answers with unknown question ids",
                extra={"test_id": test.id, "dropped_answers": dropped}
            )
        if unrecognized:
            logger.warning(
                f"Quarantined unrecognized categories for test {test.id}: {list(unrecognized)}",
                extra={"test_id": test.id, "unrecognized_categories": dict(unrecognized)}
            )

        return CategoryAggregate(
            values={key: values for key, values in grouped.items() if values},
            unrecognized=dict(unrecognized),
            matched=matched,
        )


def build_catalog(entries: Mapping[str, Iterable[str]]) -> CategoryCatalog:
    """Build a catalog from an ordered mapping of key to aliases."""
    return CategoryCatalog(entries.items())

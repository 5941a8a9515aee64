"""Base class and registry for domain scorers.

A domain scorer turns aggregated answers for one test kind into that kind's
domain analysis. Scorers register themselves against a TestKind; the analysis
pipeline looks them up here and never branches on the kind itself.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Sequence, Type, TypeVar

from psychoscore.models.report import DomainAnalysisBase
from psychoscore.services.aggregation_service import CategoryAggregate, CategoryCatalog
from psychoscore.utils.constants import ErrorCodes, ScoringConstants, TestKind
from psychoscore.utils.exceptions import ScoringError
from psychoscore.utils.helpers import likert_values, mean, round_half_up
from psychoscore.utils.logger import get_logger

logger = get_logger(__name__)

S = TypeVar("S", bound="DomainScorer")


class DomainScorer(ABC):
    """Stateless scorer for one assessment domain."""

    kind: TestKind

    @property
    @abstractmethod
    def catalog(self) -> CategoryCatalog:
        """Categories this scorer understands."""

    @abstractmethod
    def score(self, aggregate: CategoryAggregate) -> DomainAnalysisBase:
        """Score aggregated answers.

        Args:
            aggregate: Answers grouped by this scorer's catalog

        Returns:
            DomainAnalysisBase: The domain analysis variant for this kind
        """

    @staticmethod
    def likert_percentage(values: Sequence[int]) -> Optional[int]:
        """Percentage of the 1-5 scale reached by the mean of in-range values.

        Args:
            values: Integer-coerced answers; values outside 1-5 are ignored

        Returns:
            Optional[int]: Rounded percentage, or None when no value is in range
        """
        usable = likert_values(values, ScoringConstants.LIKERT_MIN, ScoringConstants.LIKERT_MAX)
        average = mean(usable)
        if average is None:
            return None
        return round_half_up(average / ScoringConstants.LIKERT_MAX * 100)

    def sub_scores(self, aggregate: CategoryAggregate) -> Dict[str, int]:
        """Likert percentage per catalog key that has usable answers."""
        scores: Dict[str, int] = {}
        for key in self.catalog.keys:
            score = self.likert_percentage(aggregate.values_for(key))
            if score is not None:
                scores[key] = score
        return scores


class ScorerRegistry:
    """Maps each TestKind to the scorer class that handles it."""

    def __init__(self):
        self._scorers: Dict[TestKind, Type[DomainScorer]] = {}

    def register(self, kind: TestKind) -> Callable[[Type[S]], Type[S]]:
        """Class decorator registering a scorer for ``kind``.

        Raises:
            ScoringError: If another scorer already handles ``kind``
        """
        def decorator(scorer_cls: Type[S]) -> Type[S]:
            existing = self._scorers.get(kind)
            if existing is not None and existing is not scorer_cls:
                raise ScoringError(
                    f"Scorer already registered for {kind.value}: {existing.__name__}",
                    test_kind=kind.value,
                    error_code=ErrorCodes.DUPLICATE_SCORER,
                )
            scorer_cls.kind = kind
            self._scorers[kind] = scorer_cls
            logger.debug(f"Registered scorer {scorer_cls.__name__} for {kind.value}")
            return scorer_cls

        return decorator

    def get(self, kind: Optional[TestKind]) -> Optional[DomainScorer]:
        """Instantiate the scorer for ``kind``, or None when there is none."""
        if kind is None:
            return None
        scorer_cls = self._scorers.get(kind)
        return scorer_cls() if scorer_cls is not None else None

    @property
    def kinds(self) -> List[TestKind]:
        return list(self._scorers)


registry = ScorerRegistry()

"""Response reliability auditing for PsychoScore.

This service judges whether a response set can be trusted, based on how long
the candidate took and whether the answers show straight-line responding. It
runs on the raw answers, independently of any domain scorer.
"""

from typing import Sequence

from psychoscore.models.assessment import Answer
from psychoscore.utils.constants import ReliabilityConstants, ReliabilityVerdict
from psychoscore.utils.helpers import clamp, longest_identical_run
from psychoscore.utils.logger import get_logger

logger = get_logger(__name__)


class ReliabilityAuditor:
    """Assigns a reliability verdict and a verification score."""

    def assess(self, answers: Sequence[Answer], completion_time: int) -> ReliabilityVerdict:
        """Assess a response set.

        Checks run in order and the first failing check decides the verdict.

        Args:
            answers: All submitted answers, in submission order
            completion_time: Completion time in seconds

        Returns:
            ReliabilityVerdict: The verdict
        """
        if not answers:
            return ReliabilityVerdict.INVALID
        if completion_time < ReliabilityConstants.MIN_COMPLETION_SECONDS:
            return ReliabilityVerdict.TOO_FAST
        if completion_time > ReliabilityConstants.MAX_COMPLETION_SECONDS:
            return ReliabilityVerdict.TOO_SLOW

        run = longest_identical_run([answer.answer for answer in answers])
        if run > ReliabilityConstants.MAX_IDENTICAL_RUN:
            logger.info(
                f"Pattern responding detected: {run} identical consecutive answers",
                extra={"identical_run": run}
            )
            return ReliabilityVerdict.PATTERN_RESPONDING

        return ReliabilityVerdict.RELIABLE

    def verification_score(
        self,
        verdict: ReliabilityVerdict,
        completion_time: int,
        overall_score: int,
    ) -> int:
        """Confidence in the result, from 100 down to 0.

        Args:
            verdict: Reliability verdict
            completion_time: Completion time in seconds
            overall_score: Overall score (0-100)

        Returns:
            int: Verification score in [0, 100]
        """
        score = ReliabilityConstants.BASE_VERIFICATION

        if not verdict.is_reliable:
            score -= ReliabilityConstants.UNRELIABLE_PENALTY
        if completion_time < ReliabilityConstants.MIN_COMPLETION_SECONDS:
            score -= ReliabilityConstants.TOO_FAST_PENALTY
        if completion_time > ReliabilityConstants.MAX_COMPLETION_SECONDS:
            score -= ReliabilityConstants.TOO_SLOW_PENALTY
        if overall_score < ReliabilityConstants.LOW_PERFORMANCE_SCORE:
            score -= ReliabilityConstants.LOW_PERFORMANCE_PENALTY

        return clamp(score, 0, 100)

"""
Password score aggregation logic.
"""

import logging
from typing import List, Sequence, Tuple

from ..models import HeuristicSignal, PasswordEvaluation, PasswordStrength

logger = logging.getLogger(__name__)

BASE_SCORE = 0
MIN_SCORE = 0
MAX_SCORE = 100

# (minimum score, tier), checked highest first
STRENGTH_THRESHOLDS: Tuple[Tuple[int, PasswordStrength], ...] = (
    (96, PasswordStrength.GOD),
    (85, PasswordStrength.EPIC),
    (70, PasswordStrength.STRONG),
    (50, PasswordStrength.MEDIUM),
)


def strength_for(score: int) -> PasswordStrength:
    """Convert numeric score to a strength tier."""
    for minimum, strength in STRENGTH_THRESHOLDS:
        if score >= minimum:
            return strength
    return PasswordStrength.WEAK


class ScoreAggregator:
    """
    Combines heuristic signals into a single 0-100 score.

    The score starts at BASE_SCORE, every signal's contribution is added and
    the result is clamped to [MIN_SCORE, MAX_SCORE].
    """

    def aggregate(self, signals: Sequence[HeuristicSignal]) -> int:
        """
        Sum signal contributions into a bounded score.

        Args:
            signals: Signals in scorer order

        Returns:
            Score between MIN_SCORE and MAX_SCORE
        """
        total = BASE_SCORE + sum(signal.contribution for signal in signals)
        return max(MIN_SCORE, min(MAX_SCORE, total))

    def build_evaluation(self, signals: List[HeuristicSignal]) -> PasswordEvaluation:
        """
        Aggregate signals and collect their reasons.

        Args:
            signals: Signals in scorer order

        Returns:
            Immutable evaluation result
        """
        score = self.aggregate(signals)
        evaluation = PasswordEvaluation(
            score=score,
            signals=list(signals),
            reasons=[signal.detail for signal in signals if signal.detail],
        )

        logger.debug(
            f"Password scored {score}/100 (Strength: {evaluation.strength.label})"
        )

        return evaluation

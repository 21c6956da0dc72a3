"""
Password scoring module.

Heuristic scorers produce signed partial scores that the aggregator
combines into an overall 0-100 score and a strength tier.
"""

from .calculator import ScoreAggregator, strength_for
from .heuristics import run_scorers

__all__ = ["ScoreAggregator", "strength_for", "run_scorers"]

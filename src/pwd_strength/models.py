"""
Password evaluation data models.
"""

import threading
import time
from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class PasswordStrength(IntEnum):
    """Ordered strength tiers, weakest first."""

    WEAK = 0
    MEDIUM = 1
    STRONG = 2
    EPIC = 3
    GOD = 4

    @property
    def label(self) -> str:
        return self.name.lower()


class SignalCategory(str, Enum):
    """Heuristics contributing to the final score."""

    BLACKLIST = "blacklist"
    LENGTH = "length"
    VARIETY = "variety"
    UNIQUENESS = "uniqueness"
    PATTERN = "pattern"


class HeuristicSignal(BaseModel):
    """
    Partial score produced by a single heuristic.

    ``detail`` holds a human-readable reason when the heuristic found a
    weakness. It never echoes the password.
    """

    category: SignalCategory
    contribution: int = Field(..., description="Signed contribution to the score")
    detail: Optional[str] = None

    class Config:
        frozen = True


class PasswordEvaluation(BaseModel):
    """
    Result of a password evaluation.
    """

    score: int = Field(..., ge=0, le=100, description="Overall score 0-100")
    signals: List[HeuristicSignal] = Field(default_factory=list)
    reasons: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "score": 63,
                "signals": [
                    {"category": "blacklist", "contribution": 0, "detail": None},
                    {"category": "length", "contribution": 25, "detail": None},
                    {
                        "category": "variety",
                        "contribution": 35,
                        "detail": "Missing: special characters",
                    },
                    {"category": "uniqueness", "contribution": 5, "detail": None},
                    {"category": "pattern", "contribution": -2, "detail": None},
                ],
                "reasons": ["Missing: special characters"],
            }
        }

    @property
    def strength(self) -> PasswordStrength:
        """Strength tier derived from the score."""
        from .scoring.calculator import strength_for

        return strength_for(self.score)


class CancellationToken:
    """
    Thread-safe cancellation flag with an optional deadline.

    Usage:
        token = CancellationToken.with_timeout(0.5)
        evaluation = evaluate_password_strength(password, token)
    """

    def __init__(
        self,
        deadline: Optional[float] = None,
        parent: Optional["CancellationToken"] = None,
    ):
        """
        Initialize the token.

        Args:
            deadline: Absolute ``time.monotonic()`` value after which the
                token counts as cancelled. None means no deadline.
            parent: Token whose cancellation also cancels this one.
                Cancelling this token does not touch the parent.
        """
        self._event = threading.Event()
        self.deadline = deadline
        self.parent = parent

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Create a token that cancels itself ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    def is_cancelled(self) -> bool:
        """Check whether cancellation was requested or the deadline passed."""
        if self._event.is_set():
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return True
        return self.parent is not None and self.parent.is_cancelled()

"""
Password strength evaluator.

Orchestrates the evaluation: cancellation checkpoint, blacklist readiness,
scorers and aggregation. The synchronous and async entry points share the
same scoring core and only differ in how a lazy blacklist load is waited on.
"""

import asyncio
import logging
from typing import Optional, Union

from pydantic import SecretStr

from .blacklist.store import BlacklistStore, get_store
from .config import get_config
from .errors import BlacklistNotInitializedError, EvaluationCancelled
from .models import CancellationToken, PasswordEvaluation
from .scoring.calculator import ScoreAggregator
from .scoring.heuristics import run_scorers

logger = logging.getLogger(__name__)

PasswordInput = Union[str, SecretStr]

_aggregator = ScoreAggregator()


def _check_cancelled(token: Optional[CancellationToken]) -> None:
    if token is not None and token.is_cancelled():
        raise EvaluationCancelled("Password evaluation cancelled")


def _score(password: PasswordInput, store: BlacklistStore) -> PasswordEvaluation:
    """Run scorers and aggregate. Never suspends, never cancelled midway."""
    if isinstance(password, SecretStr):
        password = password.get_secret_value()
    return _aggregator.build_evaluation(run_scorers(password, store))


def evaluate_password_strength(
    password: PasswordInput,
    token: Optional[CancellationToken] = None,
) -> PasswordEvaluation:
    """
    Evaluate password strength.

    Args:
        password: Password to evaluate, plain or wrapped in SecretStr
        token: Optional cancellation token, honored before scoring starts

    Returns:
        PasswordEvaluation with score, signals and reasons

    Raises:
        EvaluationCancelled: The token fired before scoring started
        BlacklistNotInitializedError: The blacklist is not loaded and
            PWD_LAZY_INITIALIZE is off
        BlacklistError: Lazy initialization failed
    """
    _check_cancelled(token)

    store = get_store()
    if not store.is_ready():
        if not get_config().lazy_initialize:
            raise BlacklistNotInitializedError()
        logger.info("Blacklist not loaded, initializing from configured path")
        store.initialize(token=token)

    return _score(password, store)


async def evaluate_password_strength_async(
    password: PasswordInput,
    token: Optional[CancellationToken] = None,
) -> PasswordEvaluation:
    """
    Async variant of evaluate_password_strength().

    The only suspension point is a lazy blacklist load; scoring itself runs
    inline.
    """
    _check_cancelled(token)

    store = get_store()
    if not store.is_ready():
        if not get_config().lazy_initialize:
            raise BlacklistNotInitializedError()
        logger.info("Blacklist not loaded, initializing from configured path")
        await store.initialize_async(token=token)

    return _score(password, store)


async def evaluate_password_strength_to_queue(
    password: PasswordInput,
    token: CancellationToken,
    queue: "asyncio.Queue[PasswordEvaluation]",
    delay: float = 0.3,
) -> bool:
    """
    Debounced evaluation for as-you-type feedback.

    Waits ``delay`` seconds, then evaluates and puts the result on
    ``queue``. Cancelling the token during the wait drops the evaluation.

    Args:
        password: Password to evaluate
        token: Cancellation token, typically cancelled on the next keystroke
        queue: Queue receiving the evaluation
        delay: Debounce delay in seconds

    Returns:
        True if an evaluation was put on the queue
    """
    logger.debug("Password evaluation is about to start")
    await asyncio.sleep(delay)

    try:
        evaluation = await evaluate_password_strength_async(password, token)
    except EvaluationCancelled:
        logger.debug("Password evaluation cancelled before scoring")
        return False

    await queue.put(evaluation)
    return True

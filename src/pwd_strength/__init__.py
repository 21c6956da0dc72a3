"""
pwd_strength - Password strength evaluation

Scores passwords from 0 to 100 and classifies them into strength tiers
(weak, medium, strong, epic, god), rejecting passwords found in a list of
common passwords.

Main modules:
- blacklist: Common password list loading and lookup
- scoring: Heuristic scorers and score aggregation
- evaluator: Sync and async evaluation entry points with cancellation

Environment variables:
- PWD_BLACKLIST_PATH: Blacklist file (default: ./assets/blacklist.txt)
- PWD_LAZY_INITIALIZE: Load the blacklist on first evaluation (default: false)

Example:
    from pwd_strength import initialize_blacklist, evaluate_password_strength

    initialize_blacklist()
    evaluation = evaluate_password_strength("MyP@ssw0rd!")
    print(evaluation.score, evaluation.strength.label)
"""

__version__ = "0.1.0"

from .blacklist import (
    get_blacklist,
    get_blacklist_path,
    initialize_blacklist,
    initialize_blacklist_async,
    is_blacklisted,
)
from .errors import (
    BlacklistAlreadyInitializedError,
    BlacklistEmptyError,
    BlacklistError,
    BlacklistNotFoundError,
    BlacklistNotInitializedError,
    BlacklistReadError,
    EvaluationCancelled,
    PasswordStrengthError,
)
from .evaluator import (
    evaluate_password_strength,
    evaluate_password_strength_async,
    evaluate_password_strength_to_queue,
)
from .models import (
    CancellationToken,
    HeuristicSignal,
    PasswordEvaluation,
    PasswordStrength,
    SignalCategory,
)
from .scoring import strength_for

__all__ = [
    "__version__",
    "get_blacklist",
    "get_blacklist_path",
    "initialize_blacklist",
    "initialize_blacklist_async",
    "is_blacklisted",
    "evaluate_password_strength",
    "evaluate_password_strength_async",
    "evaluate_password_strength_to_queue",
    "strength_for",
    "CancellationToken",
    "HeuristicSignal",
    "PasswordEvaluation",
    "PasswordStrength",
    "SignalCategory",
    "PasswordStrengthError",
    "BlacklistError",
    "BlacklistNotFoundError",
    "BlacklistReadError",
    "BlacklistEmptyError",
    "BlacklistAlreadyInitializedError",
    "BlacklistNotInitializedError",
    "EvaluationCancelled",
]

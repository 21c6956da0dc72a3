"""
Heuristic scorers.

Each scorer looks at one aspect of a password and returns a HeuristicSignal
with a bounded, signed contribution. Scorers are pure: the blacklist scorer
only reads the published blacklist.

The constants below are the tunable surface of the engine. They must keep
BASE_SCORE + MAX_POSITIVE_SCORE + BLACKLIST_PENALTY <= 49 so that any
blacklisted password ends up WEAK.
"""

from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from ..blacklist.store import BlacklistStore, get_store
from ..models import HeuristicSignal, SignalCategory

# Length: 2.5 points per character, saturating at 16 characters
MIN_LENGTH = 8
LENGTH_CEILING = 16
LENGTH_POINTS_PER_CHAR = 2.5
MAX_LENGTH_SCORE = int(LENGTH_CEILING * LENGTH_POINTS_PER_CHAR)

# Variety: points by number of character classes present
VARIETY_SCORES: Dict[int, int] = {0: 0, 1: 0, 2: 30, 3: 35, 4: 40}
# Extra variety points for two or more special characters
MULTI_SPECIAL_MIN = 2
MULTI_SPECIAL_BONUS = 5
MAX_VARIETY_SCORE = max(VARIETY_SCORES.values()) + MULTI_SPECIAL_BONUS

# Uniqueness: (minimum distinct characters, points), highest first
UNIQUENESS_STEPS: Tuple[Tuple[int, int], ...] = ((16, 15), (12, 10), (8, 5))
MAX_UNIQUENESS_SCORE = UNIQUENESS_STEPS[0][1]

# Pattern: penalty scaled by the fraction of the password covered
PATTERN_MAX_PENALTY = 60
MIN_REPEAT_RUN = 3
MIN_SEQUENCE_RUN = 4
MIN_KEYBOARD_RUN = 4
KEYBOARD_ROWS: Tuple[str, ...] = (
    "1234567890",
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
    "!@#$%^&*()",
)

BLACKLIST_PENALTY = -100

MAX_POSITIVE_SCORE = MAX_LENGTH_SCORE + MAX_VARIETY_SCORE + MAX_UNIQUENESS_SCORE

_KEY_POSITIONS: Dict[str, Tuple[int, int]] = {
    key: (row, col)
    for row, keys in enumerate(KEYBOARD_ROWS)
    for col, key in enumerate(keys)
}


def score_length(password: str) -> HeuristicSignal:
    """Reward length, saturating at LENGTH_CEILING characters."""
    length = len(password)
    contribution = int(min(length, LENGTH_CEILING) * LENGTH_POINTS_PER_CHAR)

    detail = None
    if length < MIN_LENGTH:
        detail = f"Password must be at least {MIN_LENGTH} characters"

    return HeuristicSignal(
        category=SignalCategory.LENGTH, contribution=contribution, detail=detail
    )


def score_variety(password: str) -> HeuristicSignal:
    """
    Reward the number of character classes present.

    Only ASCII digits count as numbers. Anything that is not a letter or a
    digit counts as a special character, and passwords with at least
    MULTI_SPECIAL_MIN of them get MULTI_SPECIAL_BONUS on top.
    """
    specials = sum(1 for c in password if not c.isalnum())
    classes = {
        "uppercase": any(c.isupper() for c in password),
        "lowercase": any(c.islower() for c in password),
        "numbers": any(c.isascii() and c.isdigit() for c in password),
        "special characters": specials > 0,
    }
    present = sum(classes.values())
    missing = [name for name, found in classes.items() if not found]

    contribution = VARIETY_SCORES[present]
    if specials >= MULTI_SPECIAL_MIN:
        contribution += MULTI_SPECIAL_BONUS

    detail = f"Missing: {', '.join(missing)}" if missing else None

    return HeuristicSignal(
        category=SignalCategory.VARIETY,
        contribution=contribution,
        detail=detail,
    )


def score_uniqueness(password: str) -> HeuristicSignal:
    """Reward passwords made of many distinct characters."""
    distinct = len(set(password))
    contribution = 0
    for minimum, points in UNIQUENESS_STEPS:
        if distinct >= minimum:
            contribution = points
            break

    return HeuristicSignal(category=SignalCategory.UNIQUENESS, contribution=contribution)


def _repeat_step(prev: str, curr: str) -> Optional[int]:
    return 0 if prev == curr else None


def _sequence_step(prev: str, curr: str) -> Optional[int]:
    delta = ord(curr) - ord(prev)
    return delta if delta in (1, -1) else None


def _keyboard_step(prev: str, curr: str) -> Optional[int]:
    a = _KEY_POSITIONS.get(prev)
    b = _KEY_POSITIONS.get(curr)
    if a is None or b is None or a[0] != b[0]:
        return None
    delta = b[1] - a[1]
    return delta if delta in (1, -1) else None


def _covered_runs(
    chars: Sequence[str],
    min_length: int,
    step: Callable[[str, str], Optional[int]],
) -> Set[int]:
    """
    Find positions covered by runs of at least ``min_length`` characters.

    A run continues while ``step`` returns the same non-None value for each
    neighbouring pair, so "abcd" and "dcba" are runs but "abcb" is not.
    """
    covered: Set[int] = set()
    start = 0
    direction: Optional[int] = None

    for i in range(1, len(chars) + 1):
        delta = step(chars[i - 1], chars[i]) if i < len(chars) else None
        if delta is not None and (direction is None or delta == direction):
            direction = delta
            continue

        if i - start >= min_length:
            covered.update(range(start, i))

        if delta is not None:
            # Direction changed: the last character starts the next run
            start = i - 1
            direction = delta
        else:
            start = i
            direction = None

    return covered


def find_patterns(password: str) -> Dict[str, Set[int]]:
    """
    Locate weak patterns in a password.

    Returns:
        Mapping of pattern kind ("repetitive", "sequential", "keyboard") to
        the positions it covers. Kinds that were not found are omitted.
    """
    lowered = password.lower()
    found = {
        "repetitive": _covered_runs(password, MIN_REPEAT_RUN, _repeat_step),
        "sequential": _covered_runs(lowered, MIN_SEQUENCE_RUN, _sequence_step),
        "keyboard": _covered_runs(lowered, MIN_KEYBOARD_RUN, _keyboard_step),
    }
    return {kind: positions for kind, positions in found.items() if positions}


def score_patterns(password: str) -> HeuristicSignal:
    """Penalize repeated, sequential and keyboard-walk runs."""
    if len(password) < MIN_REPEAT_RUN:
        return HeuristicSignal(category=SignalCategory.PATTERN, contribution=0)

    patterns = find_patterns(password)
    if not patterns:
        return HeuristicSignal(category=SignalCategory.PATTERN, contribution=0)

    covered: Set[int] = set().union(*patterns.values())
    penalty = int(round(PATTERN_MAX_PENALTY * len(covered) / len(password)))

    return HeuristicSignal(
        category=SignalCategory.PATTERN,
        contribution=-penalty,
        detail=f"Password contains {', '.join(patterns)} patterns",
    )


def score_blacklist(
    password: str, store: Optional[BlacklistStore] = None
) -> HeuristicSignal:
    """
    Apply BLACKLIST_PENALTY to passwords found in the blacklist.

    Raises:
        BlacklistNotInitializedError: The blacklist was never loaded
    """
    if store is None:
        store = get_store()
    if store.contains(password):
        return HeuristicSignal(
            category=SignalCategory.BLACKLIST,
            contribution=BLACKLIST_PENALTY,
            detail="Password is in the list of most common passwords",
        )
    return HeuristicSignal(category=SignalCategory.BLACKLIST, contribution=0)


def run_scorers(
    password: str, store: Optional[BlacklistStore] = None
) -> List[HeuristicSignal]:
    """
    Run every scorer in a fixed order.

    Args:
        password: Plaintext password, only read for the duration of the call
        store: Blacklist store, defaults to the process-wide one

    Returns:
        Signals in blacklist, length, variety, uniqueness, pattern order
    """
    return [
        score_blacklist(password, store),
        score_length(password),
        score_variety(password),
        score_uniqueness(password),
        score_patterns(password),
    ]
